"""主程序入口 - 批量计算中缀表达式"""
import argparse
import logging
import sys

import pandas as pd

from config.config import TOKENIZER_CONFIG, EVALUATOR_CONFIG, DATA_CONFIG, LOGGING_CONFIG, validate_config
from calculator.evaluator import ExpressionEvaluator
from data.data_loader import load_expressions, save_results
from utils.metrics import summarize_results

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Infix arithmetic evaluator (shunting-yard + RPN)")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. \"2 + 3 * (4 - 1)\""
    )
    parser.add_argument(
        "--data_path",
        type=str,
        default=None,
        help="Path to a CSV or text file with expressions"
    )
    parser.add_argument(
        "--expression_column",
        type=str,
        default=DATA_CONFIG['expression_column'],
        help="Name of the expression column in the CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Save results to this CSV file"
    )
    parser.add_argument(
        "--legacy_tokenizer",
        action="store_true",
        help="Split input one character at a time (multi-digit numbers will not evaluate)"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Log the postfix form of each expression"
    )
    parser.add_argument(
        "--cache_size",
        type=int,
        default=EVALUATOR_CONFIG['cache_size'],
        help="Maximum number of cached results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def main(args):
    validate_config()

    merge_numeric_runs = TOKENIZER_CONFIG['merge_numeric_runs'] and not args.legacy_tokenizer
    if not merge_numeric_runs:
        logger.warning("Using legacy single-character tokenizer")

    expressions = list(args.expressions)
    if args.data_path:
        expressions.extend(load_expressions(args.data_path, args.expression_column).tolist())

    if not expressions:
        logger.error("No expressions given. Pass expressions or --data_path.")
        return 2

    evaluator = ExpressionEvaluator(cache_size=args.cache_size, merge_numeric_runs=merge_numeric_runs)
    results = evaluator.evaluate_many(expressions)

    expression_col = DATA_CONFIG['expression_column']
    result_col = DATA_CONFIG['result_column']
    error_col = DATA_CONFIG['error_column']
    postfix_col = DATA_CONFIG['postfix_column']
    for _, row in results.iterrows():
        if pd.isna(row[error_col]):
            if args.show_postfix:
                logger.info(f"{row[expression_col]}  =>  {row[postfix_col]}")
            logger.info(f"{row[expression_col]} = {row[result_col]}")
        else:
            logger.error(f"{row[expression_col]}: {row[error_col]}")

    summary = summarize_results(results, result_col, error_col)
    logger.info(f"Summary: total={summary['total']}, ok={summary['ok']}, "
                f"failed={summary['failed']}, non_finite={summary['non_finite']}")
    logger.info(f"Cache: {evaluator.cache_info}")

    if args.output_path:
        save_results(results, args.output_path)

    return 0 if summary['failed'] == 0 else 1


def cli():
    args = build_parser().parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
