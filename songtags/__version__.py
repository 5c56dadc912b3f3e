"""Version information for songtags."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to rendered JSON shape or public API
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Capability negotiation and ingestion
#         - tagtypes command builder (server >= 0.21)
#         - Line-protocol song parser (file/Last-Modified/Format/duration)
#         - mutagen reader for local files (Vorbis, ID3, MP4)
#         - Atomic config/export writes
# 0.1.0 - Initial release
#         - Dedup tag store, JSON and display rendering, substring filter
#         - Enabled-tag list parsing against server capabilities
