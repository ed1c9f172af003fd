import logging
from typing import Any, Dict, List, Literal, Optional

from omegaconf import DictConfig, OmegaConf
from pydantic import BaseModel, Field, model_validator

from jointspy.base_time import Time
from jointspy.joints_trajectory import JointsTrajectory
from jointspy.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def _to_dict(data: Any) -> Any:
    if isinstance(data, DictConfig):
        return OmegaConf.to_container(data, resolve=True)
    return data


class TrajectoryConfig(BaseModel):
    names: List[str] = Field(default_factory=list, description="Joint names, empty for unnamed joints")
    num_joints: Optional[int] = Field(None, ge=0, description="Number of joints, defaults to len(names)")
    num_samples: int = Field(0, ge=0, description="Number of samples per joint")
    sample_period_us: Optional[int] = Field(
        None, ge=0, description="Interval covered by each sample in microseconds, None for an untimed trajectory"
    )

    @model_validator(mode="before")
    @classmethod
    def from_container(cls, data: Any) -> Any:
        return _to_dict(data)

    @model_validator(mode="after")
    def check_num_joints(self) -> "TrajectoryConfig":
        if self.num_joints is None:
            self.num_joints = len(self.names)
        elif self.names and len(self.names) != self.num_joints:
            raise ValueError(
                f"num_joints is {self.num_joints} but {len(self.names)} names were given"
            )
        if self.num_joints == 0 and self.num_samples > 0:
            raise ValueError(
                f"num_samples is {self.num_samples} but a trajectory without joints has no samples"
            )
        return self


class LoggingConfig(BaseModel):
    name: str = "jointspy"
    verbose: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    formatter: Literal["system", "pipeline", "module"] = "system"

    @model_validator(mode="before")
    @classmethod
    def from_container(cls, data: Any) -> Any:
        return _to_dict(data)

    def apply(self) -> logging.Logger:
        return setup_logging(self.name, self.verbose, self.formatter)


class TrajectoryFactory:
    @staticmethod
    def get_trajectory(config: TrajectoryConfig) -> JointsTrajectory:
        if not isinstance(config, TrajectoryConfig):
            config = TrajectoryConfig.model_validate(config)

        traj = JointsTrajectory()
        traj.resize(config.num_joints, config.num_samples)
        if config.names:
            traj.names = config.names
        else:
            traj.names = []

        if config.sample_period_us is not None:
            traj.times = [Time(config.sample_period_us) for _ in range(config.num_samples)]

        logger.debug(f"Built trajectory from config: {config.model_dump()}")
        return traj

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> JointsTrajectory:
        return TrajectoryFactory.get_trajectory(TrajectoryConfig.model_validate(data))
