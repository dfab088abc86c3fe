"""Example pipeline: solve a few right triangles and browse the catalog."""

from trigsketch import Session
from trigsketch.printer import format_catalog, format_info

INPUTS = [
    {"hyp": "10", "ang": "30"},
    {"opp": "3", "adj": "4"},
    {"hyp": "3", "opp": "5"},
]


def main() -> None:
    session = Session()
    for fields in INPUTS:
        outcome = session.calculate(**fields)
        if not outcome.added:
            print(f"Rejected {fields}: {outcome.error}")
            continue
        print(format_info(outcome.triangle))
        print()

    session.previous()
    print("Catalog:")
    print(format_catalog(session.catalog, session.current))


if __name__ == "__main__":
    main()
