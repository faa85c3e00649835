from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from bundle_sim.exceptions import ConfigError
from bundle_sim.types.rpc import DEFAULT_REQUEST_ID

DEFAULT_URI = "http://localhost:8545"


class SimulatorConfig(BaseSettings):
    """
    Settings for :class:`~bundle_sim.simulator.BundleSimulator`.
    Each field can also be set from the environment, e.g. ``BUNDLE_SIM_URI``.
    """

    uri: str = DEFAULT_URI
    """
    The HTTP endpoint of a node that serves ``cgp_simulateTransactionsBundle``.
    """

    request_id: int = DEFAULT_REQUEST_ID
    """
    The JSON-RPC ``id`` sent with each request.
    """

    request_headers: dict[str, str] = {}
    """
    Extra HTTP headers, such as an API key header.
    """

    model_config = SettingsConfigDict(env_prefix="BUNDLE_SIM_")

    @classmethod
    def from_overrides(cls, overrides: dict[str, Any]) -> "SimulatorConfig":
        default_values = cls().model_dump()

        def update(root: dict, value_map: dict):
            for key, val in value_map.items():
                if isinstance(val, dict) and key in root and isinstance(root[key], dict):
                    root[key] = update(root[key], val)
                else:
                    root[key] = val

            return root

        data = update(default_values, overrides)
        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise ConfigError(str(err)) from err
