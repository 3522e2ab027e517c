"""
Constants and configuration for ImpactWalk.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Optional

from pydantic_settings import BaseSettings


IMPACTWALK_SMOOTHER: int = int(os.getenv("IMPACTWALK_SMOOTHER", "2"))
IMPACTWALK_DEFAULT_ITERATIONS: int = int(os.getenv("IMPACTWALK_DEFAULT_ITERATIONS", "1000"))
IMPACTWALK_MAX_ITERATIONS: int = int(os.getenv("IMPACTWALK_MAX_ITERATIONS", "200000"))

_seed = os.getenv("IMPACTWALK_RANDOM_SEED", "")
IMPACTWALK_RANDOM_SEED: Optional[int] = int(_seed) if _seed else None

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4322
HEALTH_PATH = "/health"
API_PREFIX = "/api/v1"


class Settings(BaseSettings):
    # neighbours on either side that contribute to a smoothed point
    smoother: int = IMPACTWALK_SMOOTHER

    # monte carlo sizing
    default_iterations: int = IMPACTWALK_DEFAULT_ITERATIONS
    max_iterations: int = IMPACTWALK_MAX_ITERATIONS

    # verdicts below this probability are reported as significant
    significance_alpha: float = 0.05

    # seed for the process-wide sampler; None seeds from the clock
    random_seed: Optional[int] = IMPACTWALK_RANDOM_SEED

    # async simulation fan-out
    simulation_chunk_size: int = 2000
    simulation_max_parallel: int = 4

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "info"

    model_config = {
        "env_prefix": "IMPACTWALK_",
        "extra": "ignore",
        "env_ignore_empty": True,
    }


settings = Settings()
