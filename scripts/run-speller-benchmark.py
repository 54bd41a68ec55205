#!/usr/bin/env python3
from __future__ import annotations

import json
from pathlib import Path

from polspell.core.config import DEFAULT_DICTIONARY_PATHS, DEFAULT_LEXICON_PATH
from polspell.nlp.lexicon import LexiconStemmer
from polspell.nlp.tagger import DualCaseTagger
from polspell.services.spelling.compounds import CompoundAnalyzer
from polspell.services.spelling.prefixes import load_prefix_set
from polspell.services.spelling.speller import DictionarySpeller
from polspell.services.spelling.speller_rule import SpellerRule
from benchmark_reporting import append_benchmark_report


ROOT_DIR = Path(__file__).resolve().parents[1]
FIXTURES_DIR = ROOT_DIR / "test-data" / "fixtures" / "speller"


def _load_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


def _build_rule(dictionary_paths: tuple[Path, ...], lexicon_path: Path) -> SpellerRule:
    speller = DictionarySpeller(dictionary_paths=dictionary_paths)
    tagger = DualCaseTagger(LexiconStemmer(lexicon_path))
    return SpellerRule(
        speller=speller,
        compounds=CompoundAnalyzer(speller=speller, provider=tagger, prefixes=load_prefix_set()),
    )


def main(*, fixture: str, dictionary_paths: tuple[Path, ...], lexicon_path: Path) -> int:
    cases = _load_json(FIXTURES_DIR / fixture)
    rule = _build_rule(dictionary_paths, lexicon_path)

    flag_passed = 0
    top1_total = 0
    top1_passed = 0
    failures: list[dict[str, object]] = []

    for case in cases:
        matches = rule.match_token(case["word"], 0)
        flagged = bool(matches)
        if flagged == case["expected_flagged"]:
            flag_passed += 1
        else:
            failures.append(
                {
                    "id": case["id"],
                    "category": case["category"],
                    "expected_flagged": case["expected_flagged"],
                    "predicted_flagged": flagged,
                }
            )

        expected_top = case.get("expected_top")
        if expected_top:
            top1_total += 1
            predicted_top = matches[0].suggestions[0] if matches and matches[0].suggestions else ""
            if predicted_top == expected_top:
                top1_passed += 1
            else:
                failures.append(
                    {
                        "id": case["id"],
                        "category": case["category"],
                        "expected_top": expected_top,
                        "predicted_top": predicted_top,
                    }
                )

    total = len(cases)
    accuracy = (flag_passed / total * 100.0) if total else 0.0
    top1 = (top1_passed / top1_total * 100.0) if top1_total else 0.0
    print("Polspell Speller Benchmark")
    print(f"Cases: {total}")
    print(f"Flag accuracy: {flag_passed}/{total} ({accuracy:.1f}%)")
    print(f"Top-1 suggestion accuracy: {top1_passed}/{top1_total} ({top1:.1f}%)")

    report_path = append_benchmark_report(
        benchmark="speller",
        run_data={
            "fixture": fixture,
            "dictionary_paths": [str(path) for path in dictionary_paths],
            "lexicon_path": str(lexicon_path),
            "summary": {
                "flag_accuracy": {"passed": flag_passed, "total": total, "accuracy": round(accuracy, 2)},
                "top1_accuracy": {"passed": top1_passed, "total": top1_total, "accuracy": round(top1, 2)},
            },
            "top_failures": failures[:20],
        },
    )
    print(f"Report updated: {report_path.relative_to(ROOT_DIR)}")
    return 0 if not failures else 1


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Run the Polspell speller benchmark.")
    parser.add_argument("--fixture", default="speller_cases.json", help="Fixture file under test-data/fixtures/speller.")
    parser.add_argument(
        "--dictionary",
        action="append",
        type=Path,
        help="Word list to load; repeat for several. Defaults to the bundled sample list.",
    )
    parser.add_argument("--lexicon", type=Path, default=DEFAULT_LEXICON_PATH, help="Tab-separated lexicon.")
    args = parser.parse_args()
    raise SystemExit(
        main(
            fixture=args.fixture,
            dictionary_paths=tuple(args.dictionary) if args.dictionary else DEFAULT_DICTIONARY_PATHS,
            lexicon_path=args.lexicon,
        )
    )
