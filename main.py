#!/usr/bin/env python3
"""
Room Loader - Command Line Entry Point

Loads a room from a Wavefront OBJ scene, prints a summary and the
diagnostic report, and optionally writes the room as JSON.
"""

import argparse
import logging
import sys
from pathlib import Path

from roomloader.conversion.room_assembler import load_room
from roomloader.conversion.room_export import count_things_by_type, export_room_to_json
from roomloader.profiles.loader_profile import DirectivePolicy, LoaderProfile
from roomloader.profiles.profile_storage import load_profile_from_path
from roomloader.validation.core import RoomLoadError, ValidationResult

logger = logging.getLogger("roomloader")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Build a room (start, colliders, things) from an OBJ scene.")
    p.add_argument("scene", help="Input .obj scene, triangulated")
    p.add_argument("--profile", default=None, help="Loader profile JSON")
    p.add_argument("--json", dest="json_out", default=None, help="Write the room as JSON here")
    p.add_argument("--skip-bad-directives", action="store_true",
                   help="Drop malformed f.<type>(...) objects instead of failing")
    p.add_argument("--check-winding", action="store_true",
                   help="Report inward-wound and degenerate collision meshes")
    p.add_argument("--z-up", action="store_true", help="Scene is already Z-up, keep coordinates")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def _profile_from_args(args: argparse.Namespace) -> LoaderProfile:
    profile = load_profile_from_path(args.profile) if args.profile else LoaderProfile()
    if args.skip_bad_directives:
        profile.directive_policy = DirectivePolicy.SKIP
    if args.check_winding:
        profile.check_winding = True
    if args.z_up:
        profile.y_up_source = False
    return profile


def main(argv=None) -> int:
    """Main entry point."""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        profile = _profile_from_args(args)
    except (OSError, ValueError) as e:
        logger.error("Cannot load profile: %s", e)
        return 1

    report = ValidationResult()
    try:
        room = load_room(args.scene, profile=profile, report=report)
    except RoomLoadError as e:
        logger.error("Room load failed: %s", e)
        return 1

    print(f"Start:     {room.start}")
    print(f"Colliders: {len(room.colliders)} ({room.plane_count} planes)")
    print(f"Things:    {len(room.things)}")
    for type_name, count in count_things_by_type(room).items():
        print(f"  {type_name or '<unnamed>'}: {count}")
    print(report.report())

    if args.json_out:
        out = Path(args.json_out)
        out.write_text(export_room_to_json(room) + "\n", encoding="utf-8")
        logger.info("Room JSON written: %s", out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
