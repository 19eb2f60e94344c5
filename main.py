"""Main entry point for the grassland simulation.

This module provides command-line options to run the simulation:
- Headless mode (default): logs statistics, optionally the text map
- Visual mode: pygame window showing the grid
"""

import argparse
import logging
import sys
from typing import Optional

from grassland.config import TOPOLOGIES, SimulationParameters
from grassland.config.defaults import SEPARATOR_WIDTH
from grassland.exceptions import ConfigurationError
from grassland.logging_config import configure_logging
from grassland.observers import ConsoleMapDisplay
from grassland.simulation import Simulation, SimulationRunner

logger = logging.getLogger(__name__)


def build_parameters(args: argparse.Namespace) -> SimulationParameters:
    """Apply command-line overrides on top of the default parameters."""
    overrides = {
        "map_width": args.width,
        "map_height": args.height,
        "starting_animal_amount": args.animals,
        "starting_grass_amount": args.grass,
        "daily_grass_growth": args.daily_grass,
        "topology": args.topology,
        "day_interval": args.interval,
    }
    return SimulationParameters().with_overrides(
        **{key: value for key, value in overrides.items() if value is not None}
    )


def day_limit(days: int) -> Optional[int]:
    """Number of days to run; zero or less means until interrupted."""
    return days if days > 0 else None


def log_stats(simulation: Simulation) -> None:
    stats = simulation.stats
    logger.info(
        "Day %d: alive=%d dead=%d grass=%d avg_energy=%.1f avg_lifespan=%.1f "
        "avg_children=%.2f top_genome=%s (%d)",
        stats.day,
        stats.alive_count,
        stats.dead_count,
        stats.grass_count,
        stats.average_energy,
        stats.average_lifespan,
        stats.average_children,
        stats.most_popular_genome,
        stats.most_popular_genome_count,
    )


def run_headless(simulation: Simulation, days: int, stats_interval: int, show_map: bool) -> None:
    """Run the simulation without visualization."""
    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("HEADLESS GRASSLAND SIMULATION")
    logger.info("=" * SEPARATOR_WIDTH)
    limit = day_limit(days)
    logger.info("Running for %s days, stats every %d days", limit or "unlimited", stats_interval)

    if show_map:
        simulation.add_observer(ConsoleMapDisplay().on_map_changed)
    if stats_interval > 0:

        def report(world, message):
            # day_counter already points at the next day here
            if (simulation.day_counter - 1) % stats_interval == 0:
                log_stats(simulation)

        simulation.add_observer(report)

    runner = SimulationRunner(simulation)
    try:
        runner.run(max_days=limit)
    except KeyboardInterrupt:
        logger.info("Interrupted")

    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("SIMULATION COMPLETE - Final Statistics")
    logger.info("=" * SEPARATOR_WIDTH)
    log_stats(simulation)


def run_visual(simulation: Simulation, days: int, cell_size: int) -> None:
    """Run the simulation in a pygame window until closed or ``days`` pass."""
    try:
        import pygame

        from grassland.rendering.grid_renderer import GridRenderer
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .[visual]")
        sys.exit(1)

    pygame.init()
    try:
        size = GridRenderer.surface_size(simulation.world, cell_size)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(f"Grassland - map {simulation.world.map_id}")
        renderer = GridRenderer(screen, cell_size, pygame.font.SysFont("Arial", 14))
        clock = pygame.time.Clock()
        day_rate = 1.0 / simulation.parameters.day_interval if simulation.parameters.day_interval > 0 else 60

        limit = day_limit(days)
        paused = False
        simulation.start_running()
        while simulation.is_running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    simulation.stop_running()
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    paused = not paused
            if not paused and simulation.is_running:
                simulation.tick()
                if limit is not None and simulation.day_counter > limit:
                    simulation.stop_running()
            renderer.draw(simulation.world, simulation.stats)
            pygame.display.flip()
            clock.tick(day_rate)
    finally:
        pygame.quit()
    log_stats(simulation)


def main():
    """Parse command-line arguments and run the appropriate mode."""
    parser = argparse.ArgumentParser(
        description="Grassland grazing simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Quick headless run
  python main.py --days 200

  # Reproducible run with the text map printed each day
  python main.py --days 50 --seed 42 --show-map --width 15 --height 10

  # Watch it in a window, one day every 0.2 seconds
  python main.py --visual --interval 0.2
        """,
    )
    parser.add_argument(
        "--days", type=int, default=500, help="Days to simulate, 0 runs until interrupted (default: 500)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for deterministic runs")
    parser.add_argument("--width", type=int, default=None, help="Map width in cells")
    parser.add_argument("--height", type=int, default=None, help="Map height in cells")
    parser.add_argument("--animals", type=int, default=None, help="Starting animal count")
    parser.add_argument("--grass", type=int, default=None, help="Starting grass count")
    parser.add_argument("--daily-grass", type=int, default=None, help="Grass grown per day")
    parser.add_argument("--topology", choices=TOPOLOGIES, default=None, help="Map edge behaviour")
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between days (headless default: 0, visual default: from config)",
    )
    parser.add_argument(
        "--stats-interval", type=int, default=50, help="Log stats every N days (default: 50)"
    )
    parser.add_argument("--show-map", action="store_true", help="Log the text map every day")
    parser.add_argument("--visual", action="store_true", help="Open a pygame window")
    parser.add_argument("--cell-size", type=int, default=24, help="Cell size in pixels (visual)")
    parser.add_argument("--log-level", default=None, help="Log level (default: GRASSLAND_LOG_LEVEL or INFO)")

    args = parser.parse_args()
    configure_logging(level=args.log_level)

    if args.interval is None and not args.visual:
        args.interval = 0.0

    try:
        parameters = build_parameters(args)
        simulation = Simulation(parameters, seed=args.seed)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(2)

    if args.visual:
        run_visual(simulation, args.days, args.cell_size)
    else:
        run_headless(simulation, args.days, args.stats_interval, args.show_map)


if __name__ == "__main__":
    main()
