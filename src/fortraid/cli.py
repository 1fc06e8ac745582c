"""Command-line interface for FortRaid."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console as RichConsole
from rich.logging import RichHandler

from fortraid import __version__
from fortraid.config import (
    ProjectConfig,
    find_project_root,
    load_config,
    save_config,
    set_config_value,
)
from fortraid.exceptions import ConfigError, FortRaidError
from fortraid.ui.console import Console

console = Console()

GRAPH_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


def _setup_logging(level: str) -> None:
    """Route the fortraid loggers through a Rich handler on stderr."""
    logger = logging.getLogger("fortraid")
    logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=RichConsole(stderr=True), show_path=False))


def _get_project_root(path: str | None = None) -> Path | None:
    """Resolve the project root, or None when running without a project."""
    if path:
        root = Path(path).resolve()
        if not root.exists():
            console.error(f"Path does not exist: {path}")
            sys.exit(1)
        return root
    return find_project_root()


def _read_config(root: Path) -> ProjectConfig:
    """Load a project config or exit with an error."""
    try:
        return load_config(root)
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)


def _load_project_config(path: str | None = None) -> ProjectConfig:
    root = _get_project_root(path)
    if root is None:
        return ProjectConfig()
    return _read_config(root)


def _load_graph(graph_file: Path):
    """Load a graph file or exit with an error."""
    from fortraid.graph.io import load_graph

    try:
        return load_graph(graph_file)
    except FortRaidError as e:
        console.error(f"Could not read {graph_file}: {e}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="fortraid")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """FortRaid - find the most profitable order to attack a fort graph."""
    level = "DEBUG" if verbose else _load_project_config().log_level
    _setup_logging(level)


@main.command()
@click.option("--path", "-p", default=None, help="Path to the project root.")
def init(path: str | None):
    """Create a .fortraid configuration for a directory."""
    root = Path(path or ".").resolve()
    if not root.exists():
        console.error(f"Path does not exist: {root}")
        sys.exit(1)

    config = _read_config(root)
    config.name = root.name
    save_config(root, config)
    console.success(f"Configuration saved in {root}")


@main.command()
@click.argument("graph_file", type=GRAPH_PATH)
def info(graph_file: Path):
    """Show statistics for a graph file."""
    graph = _load_graph(graph_file)
    console.show_graph_stats(
        forts=len(graph),
        edges=graph.number_of_edges(),
        components=len(graph.components()),
        forest=graph.is_forest(),
    )


@main.command()
@click.argument("graph_file", type=GRAPH_PATH)
@click.option("--strategy", "-s", default=None, help="Strategy (dp, greedy, brute-force, random).")
@click.option("--steps", is_flag=True, help="Show a step-by-step replay.")
@click.option("--path", "-p", default=None, help="Path to the project root.")
def plan(graph_file: Path, strategy: str | None, steps: bool, path: str | None):
    """Plan an attack ordering for a graph file."""
    from fortraid.strategy.harness import evaluate, get_strategy
    from fortraid.strategy.verifier import replay

    config = _load_project_config(path)
    graph = _load_graph(graph_file)
    name = strategy or config.strategy.default

    try:
        result = evaluate(get_strategy(name, config.strategy), graph)
    except FortRaidError as e:
        console.error(str(e))
        sys.exit(1)

    console.show_plan(result)
    if steps:
        console.show_steps(replay(graph, result.ordering))


@main.command()
@click.argument("graph_file", type=GRAPH_PATH)
@click.argument("ordering", nargs=-1, required=True)
@click.option("--steps", is_flag=True, help="Show a step-by-step replay.")
def score(graph_file: Path, ordering: tuple[str, ...], steps: bool):
    """Score an attack ORDERING (all fort labels, in order)."""
    from fortraid.strategy.verifier import replay

    graph = _load_graph(graph_file)
    try:
        replayed = replay(graph, ordering)
    except FortRaidError as e:
        console.error(str(e))
        sys.exit(1)

    if steps:
        console.show_steps(replayed)
    total = sum((s.collected for s in replayed), 0.0)
    console.success(f"Ordering collects {total:g}")


@main.command()
@click.argument("graph_file", type=GRAPH_PATH)
@click.option(
    "--strategy", "-s", "strategies", multiple=True,
    help="Strategy to include (can specify multiple; default: all that apply).",
)
@click.option("--path", "-p", default=None, help="Path to the project root.")
def compare(graph_file: Path, strategies: tuple[str, ...], path: str | None):
    """Compare strategies on the same graph."""
    from fortraid.strategy.harness import STRATEGIES, evaluate, get_strategy

    config = _load_project_config(path)
    graph = _load_graph(graph_file)

    names = list(strategies)
    if not names:
        names = [
            n for n in STRATEGIES
            if not (n == "dp" and not graph.is_forest())
            and not (n == "brute-force" and len(graph) > config.strategy.brute_force_limit)
        ]

    plans = []
    for name in names:
        try:
            plans.append(evaluate(get_strategy(name, config.strategy), graph))
        except FortRaidError as e:
            console.warning(f"{name}: {e}")

    if not plans:
        console.error("No strategy produced a plan")
        sys.exit(1)
    console.show_comparison(plans)


@main.command()
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--forts", "-n", required=True, type=int, help="Number of forts.")
@click.option("--seed", default=None, type=int, help="Random seed.")
@click.option("--path", "-p", default=None, help="Path to the project root.")
def generate(output: Path, forts: int, seed: int | None, path: str | None):
    """Write a random forest of forts to OUTPUT."""
    from fortraid.graph.generator import generate_from_config
    from fortraid.graph.io import save_graph

    config = _load_project_config(path)
    try:
        graph = generate_from_config(forts, config.generator, seed=seed)
    except FortRaidError as e:
        console.error(str(e))
        sys.exit(1)

    save_graph(graph, output)
    console.success(
        f"Wrote {len(graph)} forts and {graph.number_of_edges()} edges to {output}"
    )


@main.command("config")
@click.argument("action", type=click.Choice(["set", "get", "show"]))
@click.argument("key", required=False)
@click.argument("value", required=False)
@click.option("--path", "-p", default=None, help="Path to the project root.")
def config_cmd(action: str, key: str | None, value: str | None, path: str | None):
    """Manage FortRaid configuration."""
    root = _get_project_root(path)
    if root is None:
        console.error(
            "No FortRaid project found. Run 'fortraid init' first, "
            "or specify a path with --path."
        )
        sys.exit(1)
    config = _read_config(root)

    if action == "show":
        console.console.print_json(json.dumps(config.model_dump(), indent=2))
    elif action == "get":
        if not key:
            console.error("Usage: fortraid config get <key>")
            sys.exit(1)
        data = config.model_dump()
        for part in key.split("."):
            if isinstance(data, dict) and part in data:
                data = data[part]
            else:
                console.error(f"Unknown key: {key}")
                sys.exit(1)
        console.console.print(f"{key} = {data}")
    elif action == "set":
        if not key or value is None:
            console.error("Usage: fortraid config set <key> <value>")
            sys.exit(1)
        try:
            # Try to parse as JSON for non-string values
            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                parsed_value = value

            config = set_config_value(config, key, parsed_value)
            save_config(root, config)
            console.success(f"Set {key} = {parsed_value}")
        except KeyError:
            console.error(f"Unknown config key: {key}")
            sys.exit(1)
        except ValueError as e:
            console.error(f"Invalid value for {key}: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()
