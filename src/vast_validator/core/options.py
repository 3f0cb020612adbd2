# src/vast_validator/core/options.py
from typing import Optional

import aiohttp
from pydantic import BaseModel, ConfigDict, Field

from vast_validator.utils.config_loader import get_nested_config


class HttpValidationOptions(BaseModel):
    """
    Network settings for network hooks.

    'session' is borrowed when supplied (the caller closes it); otherwise the
    validator opens one per validation call. 'timeout' bounds every single
    network hook invocation.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    session: Optional[aiohttp.ClientSession] = None
    timeout: float = Field(default_factory=lambda: float(get_nested_config("http.timeout", 2.0)), gt=0)
    user_agent: str = Field(default_factory=lambda: get_nested_config("http.user_agent", "vast-validator"))
    max_redirects: int = Field(default_factory=lambda: int(get_nested_config("http.max_redirects", 10)), ge=0)


class ValidatorOptions(BaseModel):
    """Per-call switches; none of them mutate a hook registry."""
    run_custom: bool = True
    run_network: bool = True
    http: HttpValidationOptions = Field(default_factory=HttpValidationOptions)
    max_summary_reasons: int = Field(
        default_factory=lambda: int(get_nested_config("summary.max_reasons", 5)), ge=0
    )

    def disable_custom_validators(self) -> 'ValidatorOptions':
        """Returns a copy that skips both pure and network hooks."""
        return self.model_copy(update={"run_custom": False, "run_network": False})

    def disable_network_validators(self) -> 'ValidatorOptions':
        """Returns a copy that skips network hooks only."""
        return self.model_copy(update={"run_network": False})

    def with_http(self, **kwargs) -> 'ValidatorOptions':
        """Returns a copy with the given HttpValidationOptions fields replaced."""
        return self.model_copy(update={"http": self.http.model_copy(update=kwargs)})
