"""CLI entry point for poppler-pages."""

from __future__ import annotations

import argparse
from pathlib import Path

from poppler_pages import __version__
from poppler_pages.converter import PdfConverter
from poppler_pages.dependencies import ensure_cli_dependencies_for_render, ensure_poppler_tools
from poppler_pages.exceptions import InvalidConfigurationError, PackageError
from poppler_pages.logging import configure_logging, get_logger
from poppler_pages.page_selection import parse_page_selector, resolve_pages
from poppler_pages.process import make_executable_resolver
from poppler_pages.settings import get_settings
from poppler_pages.typing.enums import PopplerTool, RasterFormat, RenderBackend
from poppler_pages.typing.models import (
    Crop,
    PageSelector,
    Password,
    RenderOptions,
    TextOptions,
    build_render_options,
    build_text_options,
)

logger = get_logger(__name__)


def _crop_from_cli(value: str) -> Crop:
    """Convert `--crop X,Y,W,H` into a crop rectangle.

    Args:
        value (str): CLI value.

    Raises:
        argparse.ArgumentTypeError: If the value is not four comma-separated integers.

    Returns:
        Crop: Crop rectangle.
    """
    parts = value.split(",")
    if len(parts) != 4:  # noqa: PLR2004
        raise argparse.ArgumentTypeError("--crop must be X,Y,WIDTH,HEIGHT")  # noqa: TRY003
    try:
        x, y, width, height = (int(part) for part in parts)
        return Crop(x=x, y=y, width=width, height=height)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid --crop value '{value}'") from exc  # noqa: TRY003


def _selector_from_cli(value: str) -> PageSelector:
    """Convert `--pages` into a page selector.

    Raises:
        argparse.ArgumentTypeError: If the expression is not `all`, `N-M` or `a,b,c`.
    """
    try:
        return parse_page_selector(value)
    except InvalidConfigurationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--input", required=True, type=Path, dest="input_path")
    password = parser.add_mutually_exclusive_group()
    password.add_argument("--owner-password", default=None, dest="owner_password")
    password.add_argument("--user-password", default=None, dest="user_password")


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="poppler-pages")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    info_parser = subparsers.add_parser("info", help="Print page count and encryption status")
    _add_common_arguments(info_parser)

    render_parser = subparsers.add_parser("render", help="Render PDF pages to image files")
    _add_common_arguments(render_parser)
    render_parser.add_argument("--output-dir", type=Path, default=Path("results"), dest="output_dir")
    render_parser.add_argument("--pages", default="all", type=_selector_from_cli, dest="selector")
    render_parser.add_argument("--dpi", type=int, default=None)
    render_parser.add_argument("--scale-to", type=int, default=None, dest="scale_to")
    render_parser.add_argument("--scale-to-width", type=int, default=None, dest="scale_to_width")
    render_parser.add_argument("--scale-to-height", type=int, default=None, dest="scale_to_height")
    render_parser.add_argument("--crop", type=_crop_from_cli, default=None)
    render_parser.add_argument("--grey", action="store_true", dest="greyscale")
    render_parser.add_argument(
        "--backend",
        type=RenderBackend.from_str,
        default=RenderBackend.PDFTOPPM,
        choices=list(RenderBackend),
    )
    render_parser.add_argument(
        "--format",
        type=RasterFormat.from_str,
        default=RasterFormat.JPEG,
        choices=list(RasterFormat),
        dest="image_format",
    )

    text_parser = subparsers.add_parser("text", help="Extract text from PDF pages")
    _add_common_arguments(text_parser)
    text_parser.add_argument("--pages", default=None, type=_selector_from_cli, dest="selector")
    text_parser.add_argument("--layout", action="store_true")
    text_parser.add_argument("--output", type=Path, default=None, dest="output_path")

    return parser


def _password_from_args(args: argparse.Namespace) -> Password | None:
    if getattr(args, "owner_password", None):
        return Password.owner(args.owner_password)
    if getattr(args, "user_password", None):
        return Password.user(args.user_password)
    return None


def _build_render_options(args: argparse.Namespace) -> RenderOptions:
    """Build render options from CLI arguments.

    Args:
        args (argparse.Namespace): Parsed CLI args.

    Raises:
        InvalidConfigurationError: If the options conflict, e.g. `--scale-to` with `--scale-to-width`.

    Returns:
        RenderOptions: Validated options.
    """
    scale_dimensions = None
    if args.scale_to_width is not None or args.scale_to_height is not None:
        scale_dimensions = {"width": args.scale_to_width, "height": args.scale_to_height}

    return build_render_options(
        resolution={"x": args.dpi, "y": args.dpi} if args.dpi is not None else None,
        scale_to=args.scale_to,
        scale_dimensions=scale_dimensions,
        crop=args.crop,
        greyscale=args.greyscale,
        password=_password_from_args(args),
        backend=args.backend,
        image_format=args.image_format,
    )


def _build_text_options(args: argparse.Namespace) -> TextOptions:
    return build_text_options(password=_password_from_args(args), layout=args.layout)


def _run_info(converter: PdfConverter, args: argparse.Namespace) -> None:
    info = converter.read_info(args.input_path.read_bytes(), _password_from_args(args))
    print(f"Pages: {info.page_count}")  # noqa: T201
    print(f"Encrypted: {'yes' if info.is_encrypted else 'no'}")  # noqa: T201


def _run_render(converter: PdfConverter, args: argparse.Namespace) -> None:
    options = _build_render_options(args)
    data = args.input_path.read_bytes()
    info = converter.read_info(data, options.password)
    images = converter.render_pages(data, args.selector, options, info=info)

    args.output_dir.mkdir(parents=True, exist_ok=True)
    for page, image in zip(resolve_pages(args.selector, info.page_count), images, strict=True):
        image.save(args.output_dir / f"page-{page}.{options.image_format.extension}")
    logger.info("Pages written", extra={"pages": len(images), "output_dir": str(args.output_dir)})


def _run_text(converter: PdfConverter, args: argparse.Namespace) -> None:
    options = _build_text_options(args)
    data = args.input_path.read_bytes()
    if args.selector is None:
        text = converter.extract_all_text(data, options)
    else:
        text = "".join(converter.extract_pages_text(data, args.selector, options))

    if args.output_path is None:
        print(text, end="")  # noqa: T201
        return
    args.output_path.parent.mkdir(parents=True, exist_ok=True)
    args.output_path.write_text(text, encoding="utf-8")
    logger.info("Text written", extra={"output_path": str(args.output_path)})


_REQUIRED_TOOLS = {
    "info": (PopplerTool.PDFINFO,),
    "text": (PopplerTool.PDFINFO, PopplerTool.PDFTOTEXT),
}


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments to parse. Defaults to `sys.argv[1:]`.

    Returns:
        int: Exit code (0 for success, 1 for error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    runners = {"info": _run_info, "render": _run_render, "text": _run_text}
    try:
        resolver = make_executable_resolver(settings.poppler_path)
        if args.command == "render":
            ensure_cli_dependencies_for_render()
            ensure_poppler_tools(resolver, (PopplerTool.PDFINFO, args.backend.tool))
        else:
            ensure_poppler_tools(resolver, _REQUIRED_TOOLS[args.command])
        runners[args.command](PdfConverter.from_settings(settings), args)
    except PackageError:
        logger.exception("Command failed", extra={"command": args.command})
        return 1
    except KeyboardInterrupt:
        logger.info("Command aborted by user")
        return 130
    except Exception:
        logger.exception("Unexpected error", extra={"command": args.command})
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
