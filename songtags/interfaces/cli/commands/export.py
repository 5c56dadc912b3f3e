"""
Export command: write the JSON records of audio files to a file.
"""

from __future__ import annotations

import argparse

from songtags.components.infrastructure.safe_write_comp import write_data_to_file
from songtags.helpers.logging_helper import sanitize_exception_message
from songtags.interfaces.cli.ui import COLOR_SUCCESS, InfoPanel, print_error, show_spinner
from songtags.interfaces.cli.utils import build_services, read_songs


def cmd_export(args: argparse.Namespace) -> int:
    """
    Export ``{"data":[...],"totalEntities":n}`` atomically to args.output.
    """
    try:
        config_service, tags_service = build_services(args)
        songs, failed = show_spinner(
            "Reading tags...",
            read_songs,
            args.paths,
            config_service.get("music_directory", ""),
        )

        records = [tags_service.render(song) for song in songs]
        records.extend(tags_service.render_absent(uri) for uri in failed)
        document = '{"data":[' + ",".join(records) + f'],"totalEntities":{len(records)}}}\n'

        result = write_data_to_file(args.output, document)
        if not result.success:
            print_error(f"Could not write {args.output}: {result.error}")
            return 1

        content = f"""[bold]Output:[/bold] {args.output}
[bold]Songs:[/bold] {len(songs)}
[bold]Unreadable:[/bold] {len(failed)}"""
        InfoPanel.show("Export Complete", content, COLOR_SUCCESS)
        return 0
    except Exception as e:
        print_error(sanitize_exception_message(e, "Export failed"))
        return 1
