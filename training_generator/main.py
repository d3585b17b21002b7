"""Command-line entry point.

Usage:
    python -m training_generator.main outputs [FILE]
    python -m training_generator.main generate FILE [--output TYPE] [--instructions TEXT] [--out PATH]
    python -m training_generator.main refine ID INSTRUCTION [--image PATH] [--out PATH]
    python -m training_generator.main history
    python -m training_generator.main export ID [--out PATH]
    python -m training_generator.main import FILE
"""

import argparse
import sys
from pathlib import Path

from training_generator.config.settings import Settings
from training_generator.creations.exceptions import CreationError
from training_generator.generation.exceptions import GenerationError
from training_generator.ingestion.exceptions import IngestionError
from training_generator.ingestion.file_loader import FileLoader
from training_generator.logging.logger import Log
from training_generator.outputs.registry import OutputType, all_output_types
from training_generator.session.exceptions import SessionError
from training_generator.session.session import TrainingSession, build_session

DEFAULT_HISTORY_PATH = Path.home() / ".training-generator" / "history.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="training-generator",
        description="Turn documents, spreadsheets, images and videos into interactive HTML training",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    outputs = commands.add_parser("outputs", help="List training output types")
    outputs.add_argument("file", nargs="?", type=Path, help="Only show outputs that accept this file")
    outputs.add_argument("--mime-type", default="", help="Declared media type of the file")

    generate = commands.add_parser("generate", help="Generate a training from a file")
    generate.add_argument("file", type=Path)
    generate.add_argument(
        "--output",
        default=OutputType.AUTO.value,
        choices=[t.value for t in OutputType],
        help="Training output type (default: auto)",
    )
    generate.add_argument("--instructions", default=None, help="Additional instructions")
    generate.add_argument("--mime-type", default="", help="Declared media type of the file")
    generate.add_argument("--out", type=Path, default=None, help="Write HTML here instead of stdout")

    refine = commands.add_parser("refine", help="Refine a training from history")
    refine.add_argument("creation_id")
    refine.add_argument("instruction")
    refine.add_argument("--image", type=Path, default=None, help="Reference image")
    refine.add_argument("--out", type=Path, default=None, help="Write HTML here instead of stdout")

    commands.add_parser("history", help="List saved trainings")

    export = commands.add_parser("export", help="Export a training as JSON")
    export.add_argument("creation_id")
    export.add_argument("--out", type=Path, default=None, help="Write JSON here instead of stdout")

    import_ = commands.add_parser("import", help="Import a training exported as JSON")
    import_.add_argument("file", type=Path)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> session -> command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    if not settings.history_path:
        settings = settings.model_copy(update={"history_path": str(DEFAULT_HISTORY_PATH)})

    try:
        if args.command == "outputs":
            return _list_outputs(args, settings)
        session = build_session(settings)
        return _run_command(session, args)
    except (IngestionError, GenerationError, CreationError, SessionError, OSError, ValueError) as exc:
        Log.error(f"Command '{args.command}' failed: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _run_command(session: TrainingSession, args: argparse.Namespace) -> int:
    loader = FileLoader()
    if args.command == "generate":
        session.upload(loader.load(args.file, args.mime_type))
        creation = session.generate(OutputType(args.output), args.instructions)
        _write(creation.html, args.out)
        print(f"Created {creation.id} ({creation.output_type.value})", file=sys.stderr)
    elif args.command == "refine":
        session.select_creation(args.creation_id)
        image = loader.load(args.image) if args.image else None
        creation = session.refine(args.instruction, image)
        _write(creation.html, args.out)
    elif args.command == "history":
        for creation in session.history.items():
            output_type = creation.output_type.value if creation.output_type else "-"
            print(f"{creation.id}  {creation.timestamp.isoformat()}  {output_type}  {creation.name}")
    elif args.command == "export":
        session.select_creation(args.creation_id)
        _write(session.export_active(), args.out)
    elif args.command == "import":
        creation = session.import_creation(args.file.read_text(encoding="utf-8"))
        print(f"Imported {creation.id} ({creation.name})")
    return 0


def _list_outputs(args: argparse.Namespace, settings: Settings) -> int:
    if args.file is None:
        configs = all_output_types()
    else:
        session = build_session(settings)
        session.upload(FileLoader().load(args.file, args.mime_type))
        configs = session.applicable_outputs()
    for config in configs:
        print(f"{config.id.value:<24} {config.name}: {config.description}")
    return 0


def _write(text: str, path: Path | None) -> None:
    if path is None:
        sys.stdout.write(text)
        sys.stdout.write("\n")
        return
    path.write_text(text, encoding="utf-8")
    Log.info(f"Wrote {len(text)} characters to {path}")


if __name__ == "__main__":
    sys.exit(main())
