from libfinder.config.resolver import ResolverConfig
from libfinder.config.logging import LoggingConfig

DEFAULT_CONFIG = {
    "resolver": ResolverConfig.default().model_dump(),
    "logging": LoggingConfig.default().model_dump(),
}
