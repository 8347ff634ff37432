import json

import typer
import uvicorn
from rich import print
from rich import print_json

from sidehustle.errors import SideHustleError
from sidehustle.factory import create_pipeline
from sidehustle.utils.logger import logger

app = typer.Typer()


@app.command()
def serve(host: str = "0.0.0.0", port: int = 8000):
    """Run the idea endpoint under uvicorn."""
    logger.info(f"Starting server on {host}:{port}")
    uvicorn.run("sidehustle.api:app", host=host, port=port)


@app.command()
def generate(
    age: float = typer.Option(..., help="Age of the user"),
    location: str = typer.Option(..., help="City, region or country"),
    strengths: str = typer.Option(..., help="What the user is good at"),
    enjoys: str = typer.Option(..., help="What the user likes doing"),
    skillset: str = typer.Option(..., help="Concrete skills the user can sell"),
    hours_per_week: float = typer.Option(..., help="Hours per week available"),
    seed_budget: float = typer.Option(..., help="Money available to start"),
):
    """
    Generate three side-hustle ideas for a profile and print them as JSON.
    """
    payload = {
        "age": age,
        "location": location,
        "strengths": strengths,
        "enjoys": enjoys,
        "skillset": skillset,
        "hoursPerWeek": hours_per_week,
        "seedBudget": seed_budget,
    }
    try:
        result = create_pipeline().run(payload)
    except SideHustleError as e:
        print(f"[bold red]{e.error}[/bold red]")
        print_json(json.dumps(e.to_dict()))
        raise typer.Exit(code=1)

    print_json(json.dumps(result, ensure_ascii=False))


if __name__ == "__main__":
    app()
