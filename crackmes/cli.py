import argparse
import logging
import sys

import requests

from crackmes.browser import Browser
from crackmes.challenge import Challenge, download
from crackmes.config import BASE_URL, make_session
from crackmes.errors import CrackmesError, DownloadError
from crackmes.filters import FilterSpec
from crackmes.pipeline import fetch
from crackmes.vocab import Arch, DifficultyLevel, Language, Platform, QualityLevel

logger = logging.getLogger(__name__)

LANGUAGES = {
    "c": Language.CCPP,
    "asm": Language.ASSEMBLER,
    "java": Language.JAVA,
    "go": Language.GO,
    "rust": Language.RUST,
    "wasm": Language.WASM,
    "basic": Language.BASIC,
    "delphi": Language.BORLAND,
    "pascal": Language.PASCAL,
    "dotnet": Language.DOTNET,
    "other": Language.OTHER,
}

ARCHES = {
    "x86": Arch.X86,
    "x64": Arch.X86_64,
    "java": Arch.JAVA,
    "arm": Arch.ARM,
    "mips": Arch.MIPS,
    "riscv": Arch.RISCV,
    "other": Arch.OTHER,
}

PLATFORMS = {
    "dos": Platform.DOS,
    "macos": Platform.MACOSX,
    "multiplatform": Platform.MULTIPLATFORM,
    "unix": Platform.UNIX,
    "windows": Platform.WINDOWS,
    "winxp": Platform.WINDOWS_XP,
    "win7": Platform.WINDOWS_7,
    "android": Platform.ANDROID,
    "ios": Platform.IOS,
    "other": Platform.OTHER,
}

DIFFICULTIES = {str(level): level for level in DifficultyLevel}
QUALITIES = {str(level): level for level in QualityLevel}

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="crackmes", description="Browse and download crackmes from crackmes.one.")
    ap.add_argument("-n", "--name", help="Challenge name to search for")
    ap.add_argument("-a", "--author", help="Challenge author to search for")
    ap.add_argument("-d", "--difficulty", choices=DIFFICULTIES, help="Difficulty band")
    ap.add_argument("-q", "--quality", choices=QUALITIES, help="Quality band")
    ap.add_argument("-l", "--language", choices=LANGUAGES, help="Programming language")
    ap.add_argument("--arch", choices=ARCHES, help="Architecture")
    ap.add_argument("-p", "--platform", choices=PLATFORMS, help="Platform")
    ap.add_argument("--base", default=BASE_URL, help="Catalog base URL")
    ap.add_argument("--proxy", help="Proxy URL for all requests (e.g. http://127.0.0.1:8080)")
    ap.add_argument("--insecure", action="store_true", help="Disable TLS verification (useful behind Burp)")
    ap.add_argument("-o", "--out", default=".", help="Directory downloads are written to")
    ap.add_argument("--list", action="store_true", help="Print the matches and exit")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return ap


def build_filter(args: argparse.Namespace) -> FilterSpec:
    return FilterSpec.from_levels(
        difficulty=DIFFICULTIES.get(args.difficulty),
        quality=QUALITIES.get(args.quality),
        name=args.name,
        author=args.author,
        language=LANGUAGES.get(args.language),
        arch=ARCHES.get(args.arch),
        platform=PLATFORMS.get(args.platform),
    )


def _truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 3] + "..."


def format_row(c: Challenge) -> str:
    return (
        f"{_truncate(c.name, 30):<30} | {c.difficulty:>4.1f} | {c.quality:>4.1f} | "
        f"{c.language.name:<15} | {c.arch.name:<8} | {c.platform.name:<15}"
    )


def render(browser: Browser) -> None:
    print()
    for i, c in enumerate(browser.challenges):
        marker = ">>" if i == browser.selected_index else "  "
        print(f"{marker} {format_row(c)}")
    selected = browser.selected()
    if selected:
        print(f"\n[{browser.selected_index + 1}/{len(browser.challenges)}] {selected.name} by {selected.author}")
    print(f"[*] {browser.status}")


def browse(browser: Browser, session: requests.Session, out_dir: str, base_url: str) -> None:
    print("j/k: move, d or Enter: download, q: quit")
    while not browser.should_quit:
        render(browser)
        try:
            key = input("> ")
        except EOFError:
            break
        browser.handle_key(key)

        if browser.should_download:
            c = browser.selected()
            try:
                path = download(c, session, out_dir, base_url)
                browser.status = f"Successfully downloaded {path.name}"
            except DownloadError as exc:
                logger.debug("%s", exc)
                browser.status = f"Failed to download {c.name}"
            browser.clear_download()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=LOG_LEVELS.get(args.verbose, logging.DEBUG),
        format="%(levelname)s %(message)s",
    )

    session = make_session(proxy=args.proxy, insecure=args.insecure)
    try:
        challenges = fetch(build_filter(args), session, args.base)
    except CrackmesError as exc:
        print(f"[!] Failed to load challenges: {exc}")
        return 1

    browser = Browser()
    browser.set_challenges(challenges)

    if args.list or not challenges:
        for c in challenges:
            print(format_row(c))
        print(f"[*] {browser.status}")
        return 0

    browse(browser, session, args.out, args.base)
    return 0


if __name__ == "__main__":
    sys.exit(main())
