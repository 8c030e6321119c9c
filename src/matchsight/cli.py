import sys
from pathlib import Path

import typer

from matchsight.config import settings
from matchsight.domain.exceptions import IngestionError, SchemaResolutionError
from matchsight.infra.dataset_store import DatasetStore
from matchsight.ingest.csv_reader import read_csv_file
from matchsight.logging import logger, get_run_id

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main():
    """
    Sports-prediction CSV analysis CLI.
    """
    pass


def _load(path: Path) -> DatasetStore:
    """Read one CSV into a fresh store, exiting with code 1 if it cannot be parsed."""
    store = DatasetStore()
    try:
        store.replace_all([read_csv_file(path)])
    except IngestionError as e:
        logger.error("Ingestion failed: %s", e.message)
        print(f"❌ {e.message}")
        raise typer.Exit(code=1)
    return store


def _pct(value: float) -> str:
    return f"{round(value * 100)}%"


@app.command(name="analyze")
def analyze(
    files: list[Path] = typer.Argument(..., help="One or more CSV files."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw analysis DTO."),
):
    """Print an automatic exploratory report for each CSV file."""
    from matchsight.services.analysis_service import AnalysisService

    failures = 0
    for path in files:
        try:
            table = read_csv_file(path)
        except IngestionError as e:
            failures += 1
            logger.warning("Skipping %s: %s", path, e.reason)
            print(f"❌ {e.message}")
            continue

        report = AnalysisService.analyze_table(table)
        if as_json:
            print(report.model_dump_json(indent=2))
            continue

        print(f"\n📊 {table.name}\n")
        print(f"  {report.summary}")
        if report.insights:
            print("\n[Insights]")
            for insight in report.insights:
                print(f"  • {insight}")
        print("\n[Charts]")
        if not report.chart_suggestions:
            print("  No suitable columns found for automatic chart generation.")
        for s in report.chart_suggestions:
            axes = s.column if s.column else f"{s.x_column} × {s.y_column}"
            print(f"  {s.kind.value:<8} {s.title}  ({axes})")

    if failures == len(files):
        raise typer.Exit(code=1)


@app.command(name="outcomes")
def outcomes(
    file: Path,
    sure_win: float = typer.Option(settings.SURE_WIN_THRESHOLD, min=0.0, max=1.0, help="Home/away win threshold."),
    draw: float = typer.Option(settings.DRAW_THRESHOLD, min=0.0, max=1.0, help="Draw threshold."),
    as_json: bool = typer.Option(False, "--json"),
):
    """List high-confidence wins and likely draws."""
    from matchsight.matching.outcome_filter import OUTCOME_DISPLAY_COLUMNS
    from matchsight.services.outcomes_service import OutcomesService

    store = _load(file)
    result = OutcomesService(store).filter(file.name, sure_win=sure_win, draw=draw)
    if as_json:
        print(result.model_dump_json(indent=2))
        return
    if not result.available:
        print(f"⚠️  {result.message}")
        raise typer.Exit(code=1)

    sections = [
        (f"High-Confidence Wins (≥ {_pct(sure_win)})", result.sure_wins),
        (f"Potential Draws (≥ {_pct(draw)})", result.draws),
    ]
    for title, picks in sections:
        print(f"\n[{title}] {len(picks)} matches")
        if not picks:
            print("  No matches meet the criteria.")
        for pick in picks:
            date, team, opponent, home, drawn, away = (
                pick.row.get(column, "N/A") for column in OUTCOME_DISPLAY_COLUMNS
            )
            print(
                f"  {team} vs {opponent}: {pick.predicted_result}"
                f"  ({date}; H {home} / D {drawn} / A {away})"
            )


@app.command(name="matchups")
def matchups(
    file: Path,
    prob_min: float | None = typer.Option(None, help="Keep matches with Prob_Max at or above this value."),
    as_json: bool = typer.Option(False, "--json"),
):
    """Summarise a team-matchup CSV."""
    from matchsight.services.matchups_service import MatchupsService

    store = _load(file)
    try:
        result = MatchupsService(store).summarize(file.name, prob_min=prob_min)
    except SchemaResolutionError as e:
        print(f"❌ {e.message}")
        raise typer.Exit(code=1)

    if as_json:
        print(result.model_dump_json(indent=2))
        return

    print(f"\n⚽ {file.name} · {result.total} rows\n")
    print(f"  Average Prob_Max: {result.stats.average:.2f}")
    print(f"  Range:            {result.stats.min:.2f} - {result.stats.max:.2f}")
    if result.highlight:
        h = result.highlight
        print(f"  Top match:        {h.team} vs {h.opponent} ({h.predicted}, {h.prob_max:.2f})")
    print(f"\n[Predicted Distribution] {len(result.rows)} of {result.total} (Prob_Max ≥ {result.prob_min:.2f})")
    for label, count in result.distribution.items():
        print(f"  {label:<12} {count}")


@app.command(name="slips")
def slips(
    file: Path,
    prob_min: float = typer.Option(0.0, help="Minimum Prob_Max before rules are applied."),
    group: str = typer.Option("all", help="Only keep this predicted outcome ('all' keeps every row)."),
    as_json: bool = typer.Option(False, "--json"),
):
    """Build accumulator and single slips from the default rule set."""
    from matchsight.api.schemas.slips import SlipRequest
    from matchsight.services.slips_service import SlipsService

    store = _load(file)
    try:
        result = SlipsService(store).build(file.name, SlipRequest(prob_min=prob_min, group=group))
    except SchemaResolutionError as e:
        print(f"❌ {e.message}")
        raise typer.Exit(code=1)

    if as_json:
        print(result.model_dump_json(indent=2))
        return

    print(f"\n🎟️  {result.filtered_count} matches passed the filter\n")
    for title, built in (("Accumulators", result.accumulators), ("Singles", result.singles)):
        print(f"[{title}]")
        if not built:
            print("  No rule matched.")
        for slip in built:
            print(f"  {slip.rule.title} · {slip.rule.market}")
            for sel in slip.selections:
                print(f"    - {sel.get('Team')} vs {sel.get('Opponent')} ({sel.get('Predicted')})")
            if slip.more_available:
                print(f"    +{slip.more_available} more available")
        print()


@app.command(name="doctor")
def doctor():
    """
    Show the active configuration.
    """
    logger.info("Running doctor check...")
    print("\n🩺 matchsight doctor\n")
    print("[Environment]")
    print(f"  Python: {sys.version.split()[0]}")
    print(f"  Run ID: {get_run_id()}")
    print("\n[Configuration]")
    for key, value in settings.model_dump().items():
        print(f"  {key + ':':<26} {value}")
    print()


if __name__ == "__main__":
    app()
