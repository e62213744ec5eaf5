# -*- coding: utf-8 -*-
"""
seed_suggestions.py: creates the tables and fills in sample suggested questions.

Modes:
- python seed_suggestions.py --create    → create MISSING tables and add sample suggestions not present yet
- python seed_suggestions.py --reset     → delete all suggestions and insert the samples again

Works with SQLite and PostgreSQL.
"""

import argparse

from app import create_app
from extensions import db
from modules.suggestions.models import Suggestion, create_suggestion

SAMPLE_SUGGESTIONS = [
    ("What is the difference between let, const and var?", "Variables"),
    ("When should I use a for loop instead of while?", "Control structures"),
    ("How does an arrow function differ from a regular function?", "Functions"),
    ("How do map(), filter() and reduce() work together?", "Arrays"),
    ("What is an algorithm?", "Introduction"),
]


def insert_samples() -> int:
    """Add sample suggestions whose text is not in the table yet. Returns how many were added."""
    existing = {s.text for s in Suggestion.query.all()}
    added = 0
    for text, category in SAMPLE_SUGGESTIONS:
        if text in existing:
            continue
        create_suggestion(text=text, category=category, active=True)
        added += 1
    return added


def clear_suggestions() -> int:
    removed = Suggestion.query.delete()
    db.session.commit()
    return removed


def main():
    parser = argparse.ArgumentParser(description="Seed suggested questions")
    grp = parser.add_mutually_exclusive_group(required=True)
    grp.add_argument("--create", action="store_true", help="create missing tables and add missing samples")
    grp.add_argument("--reset", action="store_true", help="delete all suggestions and insert the samples (data is lost)")

    args = parser.parse_args()

    app = create_app()
    with app.app_context():
        if args.reset:
            print("→ Deleting suggestions …")
            removed = clear_suggestions()
            print(f"  {removed} removed")
        db.create_all()
        added = insert_samples()
        print(f"✔ Done: {added} sample suggestions added.")


if __name__ == "__main__":
    main()
