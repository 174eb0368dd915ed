import argparse
import logging

from . import constants as C
from .analysis import system_energy, total_mass
from .app import App
from .config import SimulationConfig
from .errors import ConfigurationError
from .simulation import Simulation

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="2D gravitational N-body sandbox")
    parser.add_argument("--bodies", dest="body_count", type=int, help="Number of random bodies")
    parser.add_argument("--sun-mass", type=float, help="Mass of the sun")
    parser.add_argument("--width", type=float, help="World width")
    parser.add_argument("--height", type=float, help="World height")
    parser.add_argument("--initial-speed", type=float, help="Initial speed bound per axis")
    parser.add_argument("--max-body-mass", type=float, help="Upper bound of random body mass")
    parser.add_argument("--gravity", dest="gravitational_constant", type=float, help="Gravitational constant")
    parser.add_argument("--time-step", type=float, help="Seconds of simulation per tick")
    parser.add_argument("--seed", type=int, help="Random seed for the initial bodies")
    parser.add_argument("--prediction-steps", type=int, help="Steps simulated for orbit prediction")
    parser.add_argument("--prediction-interval", type=int, help="Steps between predicted points")
    parser.add_argument(
        "--grow-on-merge",
        action="store_true",
        default=None,
        help="Grow the absorbing body's radius when bodies merge",
    )
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--steps", type=int, default=600, help="Ticks to run when headless")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser


def run_headless(config, steps):
    """Tick the core ``steps`` times and log a summary."""
    sim = Simulation(config)
    sim.initialize()
    for _ in range(steps):
        sim.tick()
    bodies = sim.store.snapshot()
    _, _, energy = system_energy(bodies, config.gravitational_constant)
    logger.info(
        "After %d ticks: %d bodies, total mass %.2f, energy %.4e",
        steps,
        len(bodies),
        total_mass(bodies),
        energy,
    )
    return sim


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=C.LOG_FORMAT)

    try:
        config = SimulationConfig.from_args(args)
    except ConfigurationError as exc:
        parser.error(str(exc))

    if args.headless:
        run_headless(config, args.steps)
        return

    App(config).run()


if __name__ == "__main__":  # pragma: no cover - manual tool
    main()
