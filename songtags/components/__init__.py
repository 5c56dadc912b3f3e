"""Components layer - stateless domain logic modules.

Components are leaf modules that:
- Do NOT import services or interfaces
- ARE imported and used BY services and interfaces
- May import from: helpers, other components

Architecture:
- helpers/ = pure utilities and DTOs
- components/ = domain logic building blocks (this layer)
- services/ = long-lived state and configuration
- interfaces/ = CLI presentation
"""
