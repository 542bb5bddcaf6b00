"""Fetch configuration model."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from kubeutil.constants.patterns import KUBECTL_DURATION_PATTERN
from kubeutil.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubeutil.constants.values import (
    ENV_CONTEXT,
    ENV_REQUEST_TIMEOUT,
    ENV_SELECTOR,
)


class FetchOptions(BaseModel):
    """Cluster selection passed explicitly to every kubectl query."""

    model_config = ConfigDict(frozen=True)

    context: str | None = None
    selector: str | None = None
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT

    @field_validator("context", "selector")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @field_validator("request_timeout")
    @classmethod
    def _check_duration(cls, value: str) -> str:
        value = value.strip()
        if not KUBECTL_DURATION_PATTERN.match(value):
            raise ValueError(f"not a kubectl duration: {value!r}")
        return value

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: str | None,
    ) -> FetchOptions:
        """Build options from KUBEUTIL_* variables; non-None overrides win."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for field, var in (
            ("context", ENV_CONTEXT),
            ("selector", ENV_SELECTOR),
            ("request_timeout", ENV_REQUEST_TIMEOUT),
        ):
            override = overrides.get(field)
            if override is not None:
                values[field] = override
            elif env.get(var):
                values[field] = env[var]
        return cls(**values)

    def context_args(self) -> tuple[str, ...]:
        """Return the kubectl --context arguments, if any."""
        return ("--context", self.context) if self.context else ()

    def selector_args(self) -> tuple[str, ...]:
        """Return the kubectl -l arguments, if any."""
        return ("-l", self.selector) if self.selector else ()
