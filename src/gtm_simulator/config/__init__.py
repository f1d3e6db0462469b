"""Configuration models — channel assumptions and scenario settings."""

from gtm_simulator.config.channel import ChannelParameters
from gtm_simulator.config.scenario import JitterConfig, ScenarioConfig
from gtm_simulator.config.channels import (
    DEFAULT_CHANNELS,
    build_channel_table,
    default_channel_table,
    load_channel_table,
)

__all__ = [
    "ChannelParameters",
    "JitterConfig",
    "ScenarioConfig",
    "DEFAULT_CHANNELS",
    "build_channel_table",
    "default_channel_table",
    "load_channel_table",
]
