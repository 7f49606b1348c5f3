"""
Command line report for a student records file.

Usage:
    python -m student_insights --data data/students.json
    python -m student_insights --format json --student-id 3
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import get_data_path, get_line_settings, get_log_level, load_config
from .insight_generator import InsightGenerator
from .loader import load_student_records


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate student performance insights")
    parser.add_argument('--data', type=str, default=None,
                        help='Student records JSON file (default: data.students_path from config)')
    parser.add_argument('--config', type=str, default=None,
                        help='Config YAML file (default: config/insights.yaml)')
    parser.add_argument('--format', choices=['text', 'json'], default='text',
                        help='Output format')
    parser.add_argument('--student-id', type=int, default=None,
                        help='Student shown in the profile section of the JSON report')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        line_settings = get_line_settings(config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=get_log_level(config),
        stream=sys.stderr,
        format='%(levelname)s:%(name)s:%(message)s'
    )

    data_path = args.data or get_data_path(config)
    records = load_student_records(data_path)

    generator = InsightGenerator(line_settings=line_settings)

    if args.format == 'json':
        report = generator.generate_report(records, student_id=args.student_id)
        print(json.dumps(generator.format_insights_json(report), indent=2))
    else:
        print(generator.format_insights_text(records))

    return 0


if __name__ == "__main__":
    sys.exit(main())
