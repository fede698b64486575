#!/usr/bin/env python3
"""
ICD-10 Code Predictor - Demo CLI

Type a medical diagnosis and see the predicted ICD-10 code, confidence
score and review recommendation.

Usage:
    python demo_cli.py                          # Interactive mode
    python demo_cli.py "Essential hypertension" # Predict one diagnosis
    python demo_cli.py --file diagnosis.txt     # Predict from file
    python demo_cli.py --sample                 # Use sample diagnosis
    python demo_cli.py --list                   # Show reference data
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from icd_predictor.core.logging import configure_logging
from icd_predictor.schemas.base import ConfidenceTier
from icd_predictor.schemas.prediction import EMPTY_DIAGNOSIS_MESSAGE
from icd_predictor.services.confidence import confidence_tier, format_confidence, interpret_confidence
from icd_predictor.services.icd10_matcher import MatchResult, get_icd10_matcher_service

logger = logging.getLogger(__name__)

SAMPLE_DIAGNOSIS = "Type 2 diabetes mellitus"

# ============================================================================
# Display Functions
# ============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'
    GRAY = '\033[90m'


TIER_COLORS = {
    ConfidenceTier.HIGH: Colors.GREEN,
    ConfidenceTier.MEDIUM: Colors.YELLOW,
    ConfidenceTier.LOW: Colors.RED,
}


def print_header(text: str, char: str = "="):
    """Print a formatted header."""
    width = 60
    print()
    print(f"{Colors.BOLD}{Colors.CYAN}{char * width}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{text.center(width)}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{char * width}{Colors.END}")

def print_item(label: str, value: str, indent: int = 2):
    """Print a labeled item."""
    spaces = " " * indent
    print(f"{spaces}{Colors.GRAY}{label}:{Colors.END} {value}")

def print_warning(text: str):
    """Print warning message."""
    print(f"  {Colors.YELLOW}!{Colors.END} {text}")


def build_payload(diagnosis: str, result: MatchResult) -> dict:
    """Build the same JSON shape the /predict-icd endpoint returns."""
    return {
        "diagnosis": diagnosis,
        "code": result.code,
        "confidence": result.confidence,
        "confidence_percent": format_confidence(result.confidence),
        "label": result.label,
        "tier": confidence_tier(result.confidence).value,
        "interpretation": interpret_confidence(result.confidence),
    }


def display_result(result: MatchResult):
    """Print a prediction result."""
    tier = confidence_tier(result.confidence)
    color = TIER_COLORS[tier]

    print()
    print(f"  {Colors.BOLD}{result.code}{Colors.END}  {result.label}")
    print_item("Confidence", f"{color}{format_confidence(result.confidence)}{Colors.END}")
    print_item("Interpretation", f"{color}{interpret_confidence(result.confidence)}{Colors.END}")


def display_references():
    """Print the reference diagnoses used for prediction."""
    print_header("SAMPLE DATA")
    for entry in get_icd10_matcher_service().list_references():
        print(f"  {entry.label:<30} {Colors.BOLD}{entry.code}{Colors.END}")


def predict(diagnosis: str, as_json: bool = False) -> int:
    """Predict and print the code for one diagnosis.

    Returns:
        Process exit status: 1 when the diagnosis is blank.
    """
    if not diagnosis.strip():
        print_warning(f"{EMPTY_DIAGNOSIS_MESSAGE}. Enter a medical diagnosis to get ICD-10 code prediction.")
        return 1

    result = get_icd10_matcher_service().predict(diagnosis)
    logger.debug(f"Predicted {result.code} for '{diagnosis}'")

    if as_json:
        print(json.dumps(build_payload(diagnosis, result), indent=2))
    else:
        print_header("PREDICTION RESULTS")
        display_result(result)
    return 0


def read_diagnosis_file(path: Path) -> str:
    """Read a diagnosis from a file, joining non-blank lines with spaces."""
    lines = [line.strip() for line in path.read_text(encoding="utf-8").splitlines()]
    return " ".join(line for line in lines if line)


def interactive_mode():
    """Run interactive demo mode."""
    print_header("ICD-10 CODE PREDICTOR")
    print("""
  Type a medical diagnosis and press Enter.

  {bold}Commands:{end}
    list      - Show the sample data
    quit      - Exit

""".format(bold=Colors.BOLD, end=Colors.END))

    while True:
        try:
            text = input(f"{Colors.BOLD}diagnosis>{Colors.END} ")
            cmd = text.strip().lower()

            if cmd in ('quit', 'exit', 'q'):
                print("\nGoodbye!")
                break
            elif cmd == 'list':
                display_references()
            else:
                predict(text)

        except KeyboardInterrupt:
            print("\n\nGoodbye!")
            break
        except EOFError:
            print("\nGoodbye!")
            break

# ============================================================================
# Main Entry Point
# ============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="ICD-10 Code Predictor - Demo CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python demo_cli.py                            # Interactive mode
  python demo_cli.py "Essential hypertension"   # Predict one diagnosis
  python demo_cli.py --sample --json            # Sample diagnosis as JSON
  python demo_cli.py --file diagnosis.txt       # Predict from file
"""
    )
    parser.add_argument('diagnosis', nargs='?', help='Diagnosis text to predict')
    parser.add_argument('--file', '-f', help='Path to diagnosis text file')
    parser.add_argument('--sample', '-s', action='store_true', help='Use sample diagnosis')
    parser.add_argument('--list', '-l', action='store_true', help='Show the sample data')
    parser.add_argument('--json', '-j', action='store_true', help='Print the result as JSON')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    if args.list:
        display_references()
        return 0
    if args.sample:
        return predict(SAMPLE_DIAGNOSIS, as_json=args.json)
    if args.file:
        path = Path(args.file)
        if not path.is_file():
            print(f"Error: File not found: {args.file}")
            return 1
        try:
            diagnosis = read_diagnosis_file(path)
        except UnicodeDecodeError:
            print(f"Error: File is not valid UTF-8 text: {args.file}")
            return 1
        return predict(diagnosis, as_json=args.json)
    if args.diagnosis is not None:
        return predict(args.diagnosis, as_json=args.json)

    interactive_mode()
    return 0

if __name__ == "__main__":
    sys.exit(main())
