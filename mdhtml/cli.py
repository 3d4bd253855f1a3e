"""
Markdown → HTML 변환기 명령행 인터페이스
"""

import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from .core.config import DEFAULT_CONFIG, TOC_POSITIONS, Config, validate_config
from .core.converter import MarkdownConverter
from .core.extractor import extract_headings
from .core.front_matter import parse_front_matter
from .core.toc import build_toc_tree
from .utils.format import format_heading_stats, format_toc_outline

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(), format="%(asctime)s - %(levelname)s - %(message)s"
    )


def _cli_overrides(args, config: Config) -> dict:
    """환경 설정 위에 명령행 옵션을 덮어쓴 호출자 설정"""
    overrides = config.render_overrides()
    if getattr(args, "toc_depth", None) is not None:
        overrides["tocDepth"] = args.toc_depth
    if getattr(args, "toc_position", None) is not None:
        overrides["tocPosition"] = args.toc_position
    if getattr(args, "no_toc", False):
        overrides["generateToc"] = False
    if getattr(args, "no_highlight", False):
        overrides["highlight"] = False
    return overrides


def _output_path(source: Path, output_dir: str) -> Path:
    target_dir = Path(output_dir) if output_dir else source.parent
    return target_dir / f"{source.stem}.html"


def convert_command(args):
    """Markdown 파일 변환 명령"""
    try:
        config = Config()
        validate_config(config)

        css_file = args.css or config.css_file
        css = Path(css_file).read_text(encoding="utf-8") if css_file else None
        output_dir = args.output_dir or config.output_dir

        converter = MarkdownConverter()
        overrides = _cli_overrides(args, config)

        sources = [Path(path) for path in args.files]
        missing = [str(path) for path in sources if not path.is_file()]
        if missing:
            print(f"❌ 파일을 찾을 수 없습니다: {', '.join(missing)}")
            return 1

        if output_dir:
            Path(output_dir).mkdir(parents=True, exist_ok=True)

        for source in tqdm(sources, desc="변환 중", disable=len(sources) < 2):
            markdown = source.read_text(encoding="utf-8")
            document = converter.convert(
                markdown,
                css=css,
                title=args.title or source.stem,
                config=overrides,
            )
            target = _output_path(source, output_dir)
            target.write_text(document, encoding="utf-8")
            logger.info(f"HTML 저장: {target}")

        print(f"✅ {len(sources)}개 파일 변환이 완료되었습니다.")

    except Exception as e:
        logger.error(f"변환 중 오류 발생: {e}")
        return 1
    return 0


def toc_command(args):
    """문서의 제목 구조 출력 명령"""
    try:
        source = Path(args.file)
        if not source.is_file():
            print(f"❌ 파일을 찾을 수 없습니다: {args.file}")
            return 1

        converter = MarkdownConverter()
        matter = parse_front_matter(source.read_text(encoding="utf-8"))
        config = converter.resolve_config({"tocDepth": args.depth}, matter.data)

        content = converter.render_markdown(matter, config)
        headings = extract_headings(content, config.toc_depth).headings

        print(f"📖 {source.name} 목차 (깊이 {config.toc_depth}):")
        print("=" * 60)
        print(format_toc_outline(build_toc_tree(headings), show_ids=not args.no_ids))
        print("=" * 60)
        print(format_heading_stats(headings))

    except Exception as e:
        logger.error(f"목차 추출 중 오류 발생: {e}")
        return 1
    return 0


def config_command(args):
    """현재 설정 출력 명령"""
    Config.print_config()

    errors = Config.validate()
    if errors:
        for error in errors:
            print(f"⚠️ {error}")
        return 1

    print("✅ 설정이 올바릅니다.")
    return 0


def create_parser():
    """명령행 인수 파서 생성"""
    parser = argparse.ArgumentParser(
        description="Markdown → HTML 문서 변환기",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예제:
  # 단일 파일 변환 (README.html 생성)
  python main.py convert README.md

  # 여러 파일을 out/ 디렉토리로 변환, 목차는 문서 끝에
  python main.py convert docs/*.md -o out --toc-position bottom

  # 제목 구조 확인
  python main.py toc README.md --depth 4
        """,
    )
    parser.add_argument(
        "--log-level", default=Config.LOG_LEVEL, help="로그 레벨 (기본값: LOG_LEVEL 또는 INFO)"
    )

    subparsers = parser.add_subparsers(dest="command", help="사용 가능한 명령어")

    # convert 명령
    convert_parser = subparsers.add_parser("convert", help="Markdown 파일을 HTML로 변환")
    convert_parser.add_argument("files", nargs="+", help="변환할 Markdown 파일 경로")
    convert_parser.add_argument(
        "-o", "--output-dir", help="출력 디렉토리 (기본값: 입력 파일 위치)"
    )
    convert_parser.add_argument("--css", help="추가할 CSS 파일")
    convert_parser.add_argument("--title", help="HTML 제목 (기본값: 파일 이름)")
    convert_parser.add_argument(
        "--toc-depth", type=int, choices=range(1, 7), help="목차 깊이 (1-6)"
    )
    convert_parser.add_argument(
        "--toc-position", choices=TOC_POSITIONS, help="목차 위치"
    )
    convert_parser.add_argument("--no-toc", action="store_true", help="목차 생성 안 함")
    convert_parser.add_argument(
        "--no-highlight", action="store_true", help="구문 강조 사용 안 함"
    )

    # toc 명령
    toc_parser = subparsers.add_parser("toc", help="문서의 제목 구조 출력")
    toc_parser.add_argument("file", help="Markdown 파일 경로")
    toc_parser.add_argument(
        "--depth",
        type=int,
        choices=range(1, 7),
        default=DEFAULT_CONFIG.toc_depth,
        help=f"목차 깊이 (기본값: {DEFAULT_CONFIG.toc_depth})",
    )
    toc_parser.add_argument("--no-ids", action="store_true", help="앵커 ID 숨기기")

    # config 명령
    subparsers.add_parser("config", help="현재 설정 출력")

    return parser


def main(argv=None):
    """메인 함수"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    _setup_logging(args.log_level)

    # 명령 실행
    if args.command == "convert":
        return convert_command(args)
    elif args.command == "toc":
        return toc_command(args)
    elif args.command == "config":
        return config_command(args)
    else:
        parser.print_help()
        return 1
