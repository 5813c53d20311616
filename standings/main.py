import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from render.renderer import ScoreboardRenderer
from standings.config import DEFAULT_TIE_FILE
from standings.exceptions import StandingsError, TieFileError
from standings.log import set_level, setup_logger
from standings.session import TieSession
from standings.storage import load_tie
from standings.timeline import build_standings_timeline

logger = setup_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Replay a badminton tie file and print the standings."
    )
    ap.add_argument(
        "tie_file",
        nargs="?",
        default=str(DEFAULT_TIE_FILE),
        help="Tie JSON file (team names, first leg baseline, score entries)",
    )
    ap.add_argument(
        "--timeline",
        action="store_true",
        help="Print the standings after every entry as JSON instead of the scoreboard",
    )
    ap.add_argument(
        "--log-level",
        default=None,
        help="Override STANDINGS_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)",
    )
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if args.log_level:
        set_level(args.log_level)

    try:
        tie = load_tie(Path(args.tie_file))
        logger.info("Loaded %s with %d entries", args.tie_file, len(tie.entries))

        if args.timeline:
            rows = build_standings_timeline(
                tie.entries, tie.baseline, tie.match_ids, tie.wait_for_clinch
            )
            print(json.dumps(rows, indent=2, ensure_ascii=False))
            return 0

        session = TieSession(
            tie.baseline, tie.match_ids, tie.team_names, tie.wait_for_clinch
        )
        session.load_entries(tie.entries)

        renderer = ScoreboardRenderer(
            session.get_snapshot(), tie.team_names, tie.team_codes
        )
        print(renderer.render())
        return 0

    except FileNotFoundError as e:
        print("ERROR:", e)
    except TieFileError as e:
        print("INVALID TIE FILE:", e)
    except StandingsError as e:
        print("INVALID ENTRY:", e)
    except ValueError as e:
        print("INVALID ENTRY:", e)

    return 1


if __name__ == "__main__":
    sys.exit(main())
