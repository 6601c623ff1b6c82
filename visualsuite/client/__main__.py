"""
CLI: python -m visualsuite.client "a red fox in snow" [--style anime] [--archive NAME] [--save-dir DIR]
     python -m visualsuite.client --history
     python -m visualsuite.client --delete VISUAL_ID
"""
import argparse
import asyncio
import sys

from visualsuite.client.visual_client import VisualSuiteClient, save_image
from visualsuite.core.exceptions import VisualSuiteException
from visualsuite.models.generation import StyleTag
from visualsuite.observability import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m visualsuite.client",
        description="Generate an image and a Mermaid diagram from a prompt.",
    )
    parser.add_argument("prompt", nargs="?", help="Concept to manifest")
    parser.add_argument(
        "--style",
        default=StyleTag.REALISTIC.value,
        choices=[s.value for s in StyleTag],
        help="Image style (default: realistic)",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Gateway URL (or set VISUAL_SUITE_BASE_URL)",
    )
    parser.add_argument(
        "--archive",
        metavar="NAME",
        default=None,
        help="Archive the result under this archivist name",
    )
    parser.add_argument(
        "--save-dir",
        metavar="DIR",
        default=None,
        help="Write the generated image into DIR",
    )
    parser.add_argument("--history", action="store_true", help="List archived visuals")
    parser.add_argument("--delete", metavar="VISUAL_ID", default=None, help="Delete an archived visual")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log gateway calls to stdout")
    return parser


async def run(args: argparse.Namespace) -> int:
    async with VisualSuiteClient(base_url=args.base_url) as client:
        if args.history:
            for item in await client.history():
                print(f"{item.id}  {item.created_at:%Y-%m-%d %H:%M}  [{item.style}]  {item.archivist}: {item.prompt}")
            return 0

        if args.delete:
            await client.delete(args.delete)
            print(f"Deleted {args.delete}")
            return 0

        manifestation = await client.manifest(args.prompt or "", args.style)
        print(f"Enhanced prompt: {manifestation.enhanced_prompt}\n")
        print(manifestation.mermaid_code)

        if args.save_dir:
            path = save_image(manifestation, args.save_dir)
            print(f"\nWrote {path}")

        if args.archive:
            visual = await client.archive(manifestation, args.archive)
            print(f"Archived as {visual.id}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging("INFO")
    try:
        return asyncio.run(run(args))
    except VisualSuiteException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
