# src/tfs_highlight/demo.py
import argparse
import json
import sys


def _position(text, offset):
    from .highlight.orchestrator import position_at

    line, character = position_at(text, offset)
    return f"{line + 1}:{character + 1}"


def _build_result(text, config, with_colors):
    from .highlight.color.logic.document_colors import (
        color_presentations,
        extract_document_colors,
    )
    from .highlight.orchestrator import compute_decorations

    state = compute_decorations(text, config)
    result = {
        "config": {
            "enableColorHighlight": config.enable_color_highlight,
            "compensationMode": config.compensation_mode,
            "minLuminance": config.min_luminance,
        },
        "tokens": {name: {"raw": raw, "render": state.render_colors.get(name)}
                   for name, raw in state.registry.items()},
        "spans": [
            {
                "text": text[s.start:s.end],
                "range": [s.start, s.end],
                "at": _position(text, s.start),
                "category": s.category,
                "color": s.render_color,
                "marker": s.marker,
            }
            for s in state.token_spans
        ],
        "states": [
            {"text": text[s.start:s.end], "range": [s.start, s.end], "color": s.color}
            for s in state.states
        ],
    }
    if with_colors:
        result["colors"] = [
            {
                "text": info.text,
                "range": [info.start, info.end],
                "at": _position(text, info.start),
                "rgba": [round(c, 4) for c in info.color],
                "presentations": list(color_presentations(info.color)),
            }
            for info in extract_document_colors(text)
        ]
    return result


def main(argv=None):
    """CLI demo: compute TFS color highlight spans for a file (or stdin) and print JSON."""
    from .highlight.general.utils.load_config import load_highlight_config

    parser = argparse.ArgumentParser(
        prog="tfs-highlight",
        description="Compute color highlight spans for a TFS document.",
    )
    parser.add_argument("file", nargs="?", help="TFS file to analyze (default: stdin)")
    parser.add_argument("--settings", help="Settings JSON (comments allowed); default $TFS_SETTINGS")
    parser.add_argument(
        "--no-inline",
        action="store_true",
        help="Swatch markers only, never recolor identifier text",
    )
    parser.add_argument("--compensation", choices=("auto", "off"), help="Override compensation mode")
    parser.add_argument(
        "--min-luminance",
        type=float,
        dest="min_luminance",
        help="Override the luminance target",
    )
    parser.add_argument("--colors", action="store_true", help="Also list color literals")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)

    if args.debug:
        import logging
        import os

        from .highlight.general.utils.log import reload_topics

        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        os.environ.setdefault("TFS_DEBUG_TOPICS", "all")
        reload_topics()

    try:
        from dataclasses import replace

        config = load_highlight_config(args.settings)
        if args.no_inline:
            config = replace(config, enable_color_highlight=False)
        if args.compensation:
            config = replace(config, compensation_mode=args.compensation)
        if args.min_luminance is not None:
            config = replace(config, min_luminance=args.min_luminance)

        if args.file:
            with open(args.file, encoding="utf-8") as f:
                text = f.read()
        else:
            text = sys.stdin.read()

        result = _build_result(text, config, args.colors)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
