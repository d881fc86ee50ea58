from .logger import SimulatorLogger, Logger
