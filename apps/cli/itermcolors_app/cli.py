"""CLI entrypoints for converting, inspecting and previewing iTerm2 color presets."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import fields
from importlib import metadata
from pathlib import Path

from itermcolors_core import AppConfig, configure_logging, get_logger, load_config
from itermcolors_renderer import PaletteRenderer
from itermcolors_scheme import ColorScheme, SchemeError, SpecialColors, to_hex


KITTY_HEADING = "Kitty color scheme:"


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _installed_version() -> str:
    try:
        return metadata.version("itermcolors")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _input_path(args: argparse.Namespace, cfg: AppConfig) -> Path:
    return Path(args.input or cfg.input.default_path).expanduser()


def _load_scheme(path: Path) -> ColorScheme:
    scheme = ColorScheme.from_file(path)
    get_logger().info(f"loaded color scheme from {path}", extra={"event": "scheme_loaded", "source": path})
    return scheme


def cmd_convert(args: argparse.Namespace, cfg: AppConfig) -> int:
    path = _input_path(args, cfg)
    kitty = _load_scheme(path).render()

    output = args.output or cfg.output.path
    if output:
        out_path = Path(output).expanduser()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(kitty, encoding="utf-8")
        get_logger().info(
            f"wrote kitty colors to {out_path}",
            extra={"event": "scheme_converted", "source": path, "output": out_path},
        )
        return 0

    if cfg.output.heading and not args.no_heading:
        print(KITTY_HEADING)
        print(kitty)
    else:
        sys.stdout.write(kitty)
    get_logger().info("wrote kitty colors to stdout", extra={"event": "scheme_converted", "source": path})
    return 0


def cmd_inspect(args: argparse.Namespace, cfg: AppConfig) -> int:
    path = _input_path(args, cfg)
    scheme = _load_scheme(path)
    _print_json(
        {
            "source": str(path),
            "ansi": [str(to_hex(c)) for c in scheme.ansi],
            "special": {f.name: str(to_hex(getattr(scheme.special, f.name))) for f in fields(SpecialColors)},
        }
    )
    return 0


def cmd_preview(args: argparse.Namespace, cfg: AppConfig) -> int:
    path = _input_path(args, cfg)
    scheme = _load_scheme(path)
    swatch = max(8, min(256, args.swatch)) if args.swatch is not None else cfg.preview.swatch
    renderer = PaletteRenderer(swatch=swatch, gap=cfg.preview.gap)
    out_path = renderer.save(scheme, Path(args.out or cfg.preview.path).expanduser())
    get_logger().info(
        f"wrote palette preview to {out_path}",
        extra={"event": "preview_written", "source": path, "output": out_path},
    )
    _print_json({"success": True, "preview": str(out_path), "size": list(renderer.size)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="itermcolors", description="iTerm2 color preset conversion tools")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_installed_version()}")
    parser.add_argument("--config", default=None, help="Optional path to a config.json file")
    sub = parser.add_subparsers(dest="command", required=True)

    convert_cmd = sub.add_parser("convert", help="Render a preset as kitty color settings")
    convert_cmd.add_argument("--input", default=None, help="Path to an .itermcolors file")
    convert_cmd.add_argument("--output", default=None, help="Write kitty settings to this file instead of stdout")
    convert_cmd.add_argument("--no-heading", action="store_true", help="Print only the kitty settings")
    convert_cmd.set_defaults(func=cmd_convert)

    inspect_cmd = sub.add_parser("inspect", help="Print every parsed color as JSON")
    inspect_cmd.add_argument("--input", default=None, help="Path to an .itermcolors file")
    inspect_cmd.set_defaults(func=cmd_inspect)

    preview_cmd = sub.add_parser("preview", help="Write a PNG palette preview")
    preview_cmd.add_argument("--input", default=None, help="Path to an .itermcolors file")
    preview_cmd.add_argument("--out", default=None, help="Output PNG path")
    preview_cmd.add_argument("--swatch", type=int, default=None, help="Swatch edge length in pixels")
    preview_cmd.set_defaults(func=cmd_preview)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config(Path(args.config).expanduser() if args.config else None)
    configure_logging(keep_files=cfg.logging.keep_log_files, console=cfg.logging.console)
    source = _input_path(args, cfg)
    try:
        return int(args.func(args, cfg))
    except (SchemeError, OSError) as exc:
        get_logger().error(
            f"{args.command} failed: {exc}",
            extra={"event": "scheme_error", "source": source, "error_kind": type(exc).__name__},
        )
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
