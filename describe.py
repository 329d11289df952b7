"""
Description Runner - Generate from the Terminal
===============================================

Asks for the product fields (or takes them as options), generates one
description with Gemini and prints it formatted.

    python describe.py
    python describe.py --name "Ultra Comfort Pro Chair" --features "..." \\
        --benefits "..." --audience "office professionals"
    python describe.py --raw ...     # print the unformatted text
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from product_writer.application import DescriptionService, DescriptionSession
from product_writer.domain import DisplayBlock, Heading, MissingCredentialError, ProductDetails
from product_writer.infrastructure.config import get_settings
from product_writer.infrastructure.llm import GeminiClient

logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(levelname)s - %(message)s'
)

FIELD_PROMPTS = [
    ("name", "Product Name"),
    ("features", "Key Features (comma-separated)"),
    ("benefits", "Benefits (comma-separated)"),
    ("target_audience", "Target Audience"),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate an AI product description")
    parser.add_argument("--name", help="product name")
    parser.add_argument("--features", help="key features, comma-separated")
    parser.add_argument("--benefits", help="benefits, comma-separated")
    parser.add_argument("--audience", dest="target_audience", help="target audience")
    parser.add_argument("--raw", action="store_true", help="print the unformatted model text")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable info logging")
    return parser


def collect_details(args: argparse.Namespace) -> ProductDetails:
    """Fill missing options interactively."""
    values = {}
    for field_name, label in FIELD_PROMPTS:
        value = getattr(args, field_name)
        if value is None:
            value = input(f"{label}: ").strip()
        values[field_name] = value
    return ProductDetails(**values)


def render_blocks(blocks: List[DisplayBlock]) -> str:
    """Plain-text rendering: underlined headings, starred emoji paragraphs."""
    out = []
    for block in blocks:
        if isinstance(block, Heading):
            out.append(block.text)
            out.append("─" * max(len(block.text), 3))
        elif block.emphasized:
            out.append("\n".join(f"★ {line}" if i == 0 else f"  {line}"
                                 for i, line in enumerate(block.lines)))
        else:
            out.append(block.text)
        out.append("")
    return "\n".join(out).rstrip() + "\n"


def run(argv: Optional[List[str]] = None) -> int:
    """Generate one description. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    settings = get_settings()
    for issue in settings.validate():
        print(issue)

    try:
        session = DescriptionSession(DescriptionService(GeminiClient(settings.gemini)))
    except MissingCredentialError as e:
        print(f"Error: {e}. Set GEMINI_API_KEY in your environment or .env file.")
        return 2

    print("\n" + "=" * 60)
    print("   AI Product Description Writer")
    print("=" * 60 + "\n")

    try:
        details = collect_details(args)
    except (KeyboardInterrupt, EOFError):
        print("\nCancelled")
        return 1

    print("\nGenerating...\n")
    result = session.generate(details)

    if not result.ok:
        print(f"Error: {result.error}")
        return 1

    if args.raw:
        print(result.text)
    else:
        print(render_blocks(session.state.blocks))

    print("=" * 60)
    print(f"Generated by AI • {session.state.generated_on:%m/%d/%Y}")
    print("=" * 60 + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(run())
