import argparse
import json
import logging
import sys
from pathlib import Path


def _add_repo_to_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


def _parse_overrides(pairs: list[str]) -> dict[str, object]:
    """key=value 形式的覆盖项，value 按 JSON 解析（失败则按字符串）"""
    overrides: dict[str, object] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise SystemExit(f"覆盖项格式应为 key=value: {pair}")
        try:
            overrides[key] = json.loads(value)
        except json.JSONDecodeError:
            overrides[key] = value
    return overrides


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Decode ASCIImage files (raw grid or YAML) and print them as JSON."
    )
    parser.add_argument("paths", nargs="+", help="ASCIImage 文件（纯文本或YAML）")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="全局元数据覆盖，可重复（例：--set fill=red --set stroke_width=2）",
    )
    parser.add_argument(
        "--config",
        default="",
        help="运行期配置YAML（默认：asciimage.yaml）",
    )
    args = parser.parse_args(argv)

    _add_repo_to_path()
    from asciimage.config import get_config, reload_config  # type: ignore
    from asciimage.interfaces import AsciiImageError  # type: ignore
    from asciimage.loader import load_image  # type: ignore
    from asciimage.parsing import ImageParser  # type: ignore

    config = reload_config(args.config) if args.config else get_config()
    logging.basicConfig(level=config.logging.log_level)

    image_parser = ImageParser(config=config)
    overrides = _parse_overrides(args.overrides)

    status = 0
    for path in args.paths:
        try:
            image = load_image(path, overrides, parser=image_parser)
        except (AsciiImageError, FileNotFoundError) as exc:
            print(f"{path}: ERROR {exc}", file=sys.stderr)
            status = 1
            continue
        print(image.model_dump_json(indent=2))

    return status


if __name__ == "__main__":
    raise SystemExit(main())
