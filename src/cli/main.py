"""CLI interface for Pipeline Pilot."""
import json
import logging
import os
from pathlib import Path
from typing import Optional

import typer

from shared.schemas.brief import SAMPLE_BRIEF, brief_options
from src.leadgen.orchestrator import PlanOrchestrator

app = typer.Typer(help="Pipeline Pilot - lead-generation campaign blueprints from a brief")

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


def _load_brief(brief_file: Optional[str]) -> dict:
    if brief_file is None:
        return dict(SAMPLE_BRIEF)
    with open(brief_file, encoding="utf-8") as f:
        return json.load(f)


def generate(brief_file: Optional[str] = None, output: Optional[str] = None) -> int:
    """Generate a plan for a brief file (or the sample brief) and write it out."""
    payload = _load_brief(brief_file)
    outcome = PlanOrchestrator().generate(payload)
    body = outcome.body()
    text = json.dumps(body, indent=2, ensure_ascii=False)

    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        print(f"  → Saved {outcome.state.value} response to {output}")
    else:
        print(text)

    if outcome.status_code != 200:
        for field, message in body["issues"]["fieldErrors"].items():
            logger.error("%s: %s", field, message)
        for message in body["issues"]["formErrors"]:
            logger.error("%s", message)
        return 1
    return 0


@app.command("generate")
def cli_generate(
    brief_file: Optional[str] = typer.Argument(None, help="Path to a brief JSON file (defaults to the sample brief)"),
    output: Optional[str] = typer.Option(None, "--out", help="Write the response JSON to this file"),
):
    """Generate a campaign plan from a brief."""
    code = generate(brief_file, output)
    if code:
        raise typer.Exit(code=code)


@app.command("serve")
def cli_serve(
    host: str = typer.Option(os.environ.get("HOST", "127.0.0.1"), help="Bind address"),
    port: int = typer.Option(int(os.environ.get("PORT", "8000")), help="Bind port"),
):
    """Run the plan API with uvicorn."""
    import uvicorn

    uvicorn.run("services.api.app.main:app", host=host, port=port, reload=False)


@app.command("options")
def cli_options():
    """Print the allowed values for enumerated brief fields."""
    print(json.dumps(brief_options(), indent=2, ensure_ascii=False))


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
