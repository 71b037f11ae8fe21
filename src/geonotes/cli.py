#!/usr/bin/env python3
"""
CLI interface for geonotes.

Notes live in memory only, so the interactive menu is the main way to
use it; ``examples`` seeds a few notes and prints an export.
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from .config import load_config
from .datamodel import Audio, GeoArea, GeoPoint, Link, Note, Photo, Video
from .describe import describe_attachment
from .errors import GeoNotesError
from .exporters import export_notes
from .geo import classify
from .log import setup_logging
from .timeline import Timeline

logger = logging.getLogger(__name__)


MENU = """
--- Menu ---
1. Create a new note
2. List all notes
3. Filter notes by keyword
4. Export notes to JSON
5. Export notes to Markdown
6. Search notes by area
7. Show latest notes
8. Exit"""

ATTACHMENT_KINDS = ("photo", "audio", "link", "video")


class GeoNotesCLI:
    """Command-line interface for an in-memory note timeline."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        input_fn: Callable[[str], str] = input,
    ):
        if base_path is None:
            base_path = Path.cwd()

        self.config = load_config(base_path)
        self.timeline = Timeline()
        self.input = input_fn
        self._next_id = 1

    def create_note(
        self,
        title: str,
        content: Optional[str],
        lat: float,
        lon: float,
        attachment=None,
        created_at: Optional[datetime] = None,
    ) -> Optional[int]:
        """Create a note and add it to the timeline. Returns its id, or None if rejected."""
        try:
            note = Note(
                id=self._next_id,
                title=title,
                content=content,
                location=GeoPoint(lat=lat, lon=lon),
                created_at=created_at,
                attachment=attachment,
            )
        except (GeoNotesError, ValidationError) as exc:
            logger.warning("Rejected note: %s", exc)
            print(f"Error: {exc}")
            return None

        self._next_id += 1
        self.timeline.add_note(note)
        print(f"Note created: {note.id}")
        return note.id

    def list_notes(self):
        """List all notes in insertion order."""
        notes = self.timeline.all_notes()
        print("\n--- Notes ---")
        if not notes:
            print("No notes found.")
            return

        for note in notes:
            att = describe_attachment(note.attachment) if note.attachment else "—"
            print(
                f"ID: {note.id} | {note.title} | {note.content} | "
                f"loc={classify(note.location)} | att={att}"
            )

    def _print_results(self, notes, empty_message: str):
        print("\n--- Search results ---")
        if not notes:
            print(empty_message)
            return
        for note in notes:
            print(f"ID: {note.id} | {note.title} | {note.content}")

    def filter_notes(self, keyword: str):
        """Show notes whose title or content contains the keyword."""
        results = self.timeline.filter_by_keyword(keyword)
        self._print_results(results, f"No notes found matching: {keyword}")

    def search_area(
        self,
        min_lat: float,
        min_lon: float,
        max_lat: float,
        max_lon: float,
        keyword: str = "",
    ):
        """Show notes inside a bounding box, optionally narrowed by keyword."""
        try:
            area = GeoArea(
                top_left=GeoPoint(lat=min_lat, lon=min_lon),
                bottom_right=GeoPoint(lat=max_lat, lon=max_lon),
            )
        except (GeoNotesError, ValidationError) as exc:
            logger.warning("Rejected area: %s", exc)
            print(f"Error: {exc}")
            return
        results = self.timeline.search(area, keyword)
        self._print_results(results, "No notes found in that area.")

    def show_latest(self, n: Optional[int] = None):
        """Show the n most recent notes."""
        if n is None:
            n = int(self.config.get("latest_limit", 5))
        notes = self.timeline.latest(n)
        print(f"\n--- Latest {n} notes ---")
        if not notes:
            print("No notes found.")
            return
        for note in notes:
            print(f"ID: {note.id} | {note.created_at.strftime('%Y-%m-%d %H:%M:%S')} | {note.title}")

    def export(self, fmt: str = "json"):
        """Print the timeline in the given export format."""
        document = export_notes(self.timeline.all_notes(), fmt)
        print(f"\n--- Exporting notes to {fmt.upper()} ---")
        print(document)
        return document

    def seed_examples(self):
        """Add the three sample notes."""
        self.create_note(
            "Cádiz", "Playita", 36.5297, -6.2927,
            attachment=Photo(url="u", width=2000, height=1000),
        )
        self.create_note(
            "Sevilla", "Triana", 37.3826, -5.9963,
            attachment=Audio(url="a", duration=320),
        )
        self.create_note(
            "Córdoba", "Mezquita", 37.8790, -4.7794,
            attachment=Link(url="http://cordoba", label="Oficial"),
        )

    # Interactive prompts

    def _ask(self, prompt: str) -> str:
        return self.input(prompt)

    def _ask_float(self, prompt: str) -> float:
        return float(self._ask(prompt).strip())

    def _ask_int(self, prompt: str) -> int:
        return int(self._ask(prompt).strip())

    def _prompt_attachment(self):
        kind = self._ask(
            "Attachment (photo/audio/link/video, blank for none): "
        ).strip().lower()
        if not kind:
            return None
        if kind not in ATTACHMENT_KINDS:
            raise ValueError(f"unknown attachment type: {kind}")

        url = self._ask("URL: ")
        if kind == "photo":
            width = self._ask_int("Width: ")
            height = self._ask_int("Height: ")
            return Photo(url=url, width=width, height=height)
        if kind == "audio":
            return Audio(url=url, duration=self._ask_int("Duration (seconds): "))
        if kind == "link":
            return Link(url=url, label=self._ask("Label (optional): "))
        return Video(url=url, seconds=self._ask_int("Duration (seconds): "))

    def prompt_create_note(self):
        print("\n--- Create a new note ---")
        title = self._ask("Title: ")
        content = self._ask("Content: ")
        try:
            lat = self._ask_float("Latitude: ")
            lon = self._ask_float("Longitude: ")
            attachment = self._prompt_attachment()
        except (GeoNotesError, ValidationError, ValueError) as exc:
            logger.warning("Rejected note input: %s", exc)
            print(f"Error: {exc}")
            return None
        return self.create_note(title, content, lat, lon, attachment=attachment)

    def prompt_filter_notes(self):
        keyword = self._ask("\nKeyword to filter by: ")
        self.filter_notes(keyword)

    def prompt_search_area(self):
        print("\n--- Search by area ---")
        try:
            min_lat = self._ask_float("Min latitude: ")
            min_lon = self._ask_float("Min longitude: ")
            max_lat = self._ask_float("Max latitude: ")
            max_lon = self._ask_float("Max longitude: ")
        except ValueError as exc:
            logger.warning("Rejected area input: %s", exc)
            print(f"Error: {exc}")
            return
        keyword = self._ask("Keyword (blank for any): ")
        self.search_area(min_lat, min_lon, max_lat, max_lon, keyword)

    def prompt_latest(self):
        raw = self._ask("How many notes? ").strip()
        if not raw:
            self.show_latest()
            return
        try:
            n = int(raw)
        except ValueError:
            print("Invalid input. Please enter a number.")
            return
        self.show_latest(n)

    def run(self):
        """Interactive menu loop."""
        actions = {
            1: self.prompt_create_note,
            2: self.list_notes,
            3: self.prompt_filter_notes,
            4: lambda: self.export("json"),
            5: lambda: self.export("markdown"),
            6: self.prompt_search_area,
            7: self.prompt_latest,
        }

        print("--------------------------------------")
        print("  📝 Welcome to GeoNotes")
        print("--------------------------------------")
        while True:
            print(MENU)
            try:
                raw = self._ask("Choose an option: ")
            except EOFError:
                break
            try:
                choice = int(raw.strip())
            except ValueError:
                print("Invalid input. Please enter a number.")
                continue
            if choice == 8:
                break
            action = actions.get(choice)
            if action is None:
                print("Invalid option. Try again.")
                continue
            try:
                action()
            except EOFError:
                break
        print("Thanks for using GeoNotes! 👋")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Geolocated notes CLI")
    parser.add_argument("--base-path", type=Path, help="Directory holding .geonotes_config.json")
    parser.add_argument("--log-level", help="Logging level (overrides config)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("menu", help="Interactive menu (default)")

    examples_parser = subparsers.add_parser(
        "examples", help="Seed sample notes and print an export"
    )
    examples_parser.add_argument(
        "-f",
        "--format",
        choices=["json", "markdown"],
        help="Export format (defaults to config export_format)",
    )

    args = parser.parse_args(argv)

    cli = GeoNotesCLI(args.base_path)
    setup_logging(args.log_level or cli.config.get("log_level", "WARNING"))

    if args.command == "examples":
        cli.seed_examples()
        fmt = args.format or cli.config.get("export_format", "json")
        try:
            cli.export(fmt)
        except ValueError as exc:
            print(f"Error: {exc}")
            return 1
    else:
        cli.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
