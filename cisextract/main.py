"""
CIS Benchmark Rule Extractor Main Entry Point

Provides the CLI for extracting the rules of a CIS Benchmark PDF into a
YAML or CSV file. Initializes logging on startup and runs Steps 0-3.

Exit codes:
    0 - success
    1 - unexpected failure
    2 - invalid arguments (argparse)
    3 - the document could not be converted to text
    4 - the converted text does not follow the benchmark layout
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from cisextract.config import OUTPUT_SUFFIX, PDF_CONVERTER, SUPPORTED_CONVERTERS
from cisextract.models import FormatOptions
from cisextract.parsers import ConversionError
from cisextract.pipeline.step0_conversion import DocumentStructureError
from cisextract.pipeline.step0_conversion import run as run_step0
from cisextract.pipeline.step1_catalog import run as run_step1
from cisextract.pipeline.step2_segmentation import run as run_step2
from cisextract.pipeline.step3_export import run as run_step3
from cisextract.utils.export import default_output_path
from cisextract.utils.logging_config import get_logger, log_step_complete, setup_logger
from cisextract.utils.segmentation import SegmentationReport


EXIT_FAILURE = 1
EXIT_CONVERSION_FAILED = 3
EXIT_BAD_DOCUMENT = 4


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cisextract",
        description="Extract the rules of a CIS Benchmark PDF into YAML or CSV",
    )
    parser.add_argument("-i", "--in", dest="in_file", type=Path, required=True,
                        help="Filepath to parse (PDF, or pre-converted .txt)")
    parser.add_argument("-o", "--out", dest="out_file", type=Path,
                        help="Output filepath (default: ./<pdfname>_extracted.<csv|yaml>)")
    parser.add_argument("-t", "--trimsections", action="store_true",
                        help="Remove all new line characters from section content")
    parser.add_argument("-c", "--csv", dest="use_csv", action="store_true",
                        help="Export in CSV format (default: YAML)")
    parser.add_argument("-d", "--details", action="store_true",
                        help="Show details for identification errors")
    parser.add_argument("--converter", choices=SUPPORTED_CONVERTERS, default=PDF_CONVERTER,
                        help=f"PDF to text converter (default: {PDF_CONVERTER})")
    return parser


def extract(
    input_path: Path,
    output_path: Path,
    use_csv: bool = False,
    options: FormatOptions = FormatOptions(),
    detailed: bool = False,
    converter: str = PDF_CONVERTER,
) -> SegmentationReport:
    """
    Run the full extraction: convert, catalog, segment, export.

    Raises:
        ConversionError: If the document cannot be converted
        DocumentStructureError: If the ToC/body split fails
    """
    step_start = time.time()
    parts = run_step0(input_path, converter)
    log_step_complete("Step 0: Conversion", time.time() - step_start)

    step_start = time.time()
    catalog = run_step1(parts.toc)
    log_step_complete("Step 1: Rule Catalog", time.time() - step_start)

    step_start = time.time()
    report = run_step2(catalog, parts.body, options, detailed)
    log_step_complete("Step 2: Segmentation", time.time() - step_start)

    step_start = time.time()
    run_step3(report.rules, output_path, use_csv)
    log_step_complete("Step 3: Export", time.time() - step_start)

    return report


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CIS Benchmark Rule Extractor.

    Returns:
        Process exit code
    """
    args = build_arg_parser().parse_args(argv)

    # Initialize logging once at startup
    setup_logger()
    logger = get_logger("main")

    logger.info("=" * 80)
    logger.info("CIS Benchmark Rule Extractor")
    logger.info("=" * 80)

    output_path = args.out_file or default_output_path(args.in_file, args.use_csv, OUTPUT_SUFFIX)
    options = FormatOptions(trim_breaks=args.trimsections)
    start = time.time()

    try:
        extract(
            args.in_file,
            output_path,
            use_csv=args.use_csv,
            options=options,
            detailed=args.details,
            converter=args.converter,
        )
    except ConversionError as e:
        logger.error(f"Conversion failed: {e}")
        return EXIT_CONVERSION_FAILED
    except DocumentStructureError as e:
        logger.error(f"Unexpected document layout: {e}")
        return EXIT_BAD_DOCUMENT
    except Exception as e:
        logger.error(f"Extraction failed: {e}")
        logger.exception("Full traceback:")
        return EXIT_FAILURE

    logger.success("All done!")
    logger.info(f"  Output file:  {output_path}")
    logger.info(f"  Time elapsed: {time.time() - start:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
