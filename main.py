#!/usr/bin/env python3
"""
LaTeX Lite client - Main entry point
Renders the example documents through the LaTeX Lite API
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

import config
from services.errors import LatexClientError
from services.latex_client import LatexClient
from utils import sample_documents

EXAMPLES = ["sync", "simple", "invoice"]


def setup_logging(log_level: str = "INFO", timestamp: str = None, log_file: bool = True):
    """Set up logging configuration"""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(f"latex_client_{timestamp}.log"))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=log_format,
        handlers=handlers
    )

    return logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="LaTeX Lite API client - renders example documents to PDF"
    )

    parser.add_argument(
        "--example",
        choices=["all"] + EXAMPLES,
        default="all",
        help="Which example to run"
    )

    # API connection
    parser.add_argument(
        "--base-url",
        default=config.BASE_URL,
        help="API base URL (env: BASE_URL)"
    )

    parser.add_argument(
        "--api-key",
        default=config.API_KEY,
        help="API key (env: API_KEY)"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=config.WAIT_TIMEOUT,
        help="Seconds to wait for an async job before giving up"
    )

    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.OUTPUT_DIR,
        help="Directory where PDFs are written"
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set logging level"
    )

    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Only log to stdout"
    )

    return parser.parse_args(argv)


def run_example(client: LatexClient, name: str, output_dir: Path, timeout: float) -> bool:
    """Run one example document, returning True on success"""
    logger = logging.getLogger(__name__)

    try:
        if name == "sync":
            logger.info("⚡ Example: Sync Render (renders-sync)")
            destination = output_dir / "sync.pdf"
            client.render_sync_to_file(
                sample_documents.SYNC_TEMPLATE, sample_documents.SYNC_DATA, destination
            )
        elif name == "simple":
            logger.info("📄 Example: Simple Document")
            destination = output_dir / "simple.pdf"
            job = client.create_and_wait(
                sample_documents.SIMPLE_TEMPLATE, sample_documents.SIMPLE_DATA, destination, timeout
            )
            logger.info(f"Success: {job.id}")
        elif name == "invoice":
            logger.info("🧾 Example: Invoice")
            destination = output_dir / "invoice.pdf"
            job = client.create_and_wait(
                sample_documents.INVOICE_TEMPLATE, sample_documents.invoice_data(), destination, timeout
            )
            logger.info(f"Success: {job.id}")
        else:
            raise ValueError(f"Unknown example: {name}")

        logger.info(f"✅ PDF written: {destination}")
        return True

    except (LatexClientError, OSError, ValueError) as e:
        logger.error(f"❌ {name} example failed: {e}")
        return False


def main(argv=None):
    """Main entry point"""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    args = parse_arguments(argv)

    logger = setup_logging(args.log_level, timestamp, log_file=not args.no_log_file)

    logger.info("=" * 80)
    logger.info("🚀 LaTeX Lite API Python Client")
    logger.info("=" * 80)
    logger.info(f"API URL: {args.base_url}")
    logger.info(f"API Key: {config.preview_key(args.api_key)}...")

    examples = EXAMPLES if args.example == "all" else [args.example]

    try:
        args.output_dir.mkdir(parents=True, exist_ok=True)

        with LatexClient(args.base_url, args.api_key) as client:
            results = [run_example(client, name, args.output_dir, args.timeout) for name in examples]

        if all(results):
            logger.info("All examples complete! Check the generated PDF files.")
            return 0

        logger.error(f"{results.count(False)} of {len(results)} example(s) failed")
        return 1

    except KeyboardInterrupt:
        logger.info("⚠️ Interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
