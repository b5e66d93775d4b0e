"""MOEA/D configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .base import _SerializableConfig, _require_fields


@dataclass(frozen=True)
class MOEADConfigData(_SerializableConfig):
    num_objectives: int
    num_problems: int
    neighborhood_size: int
    number_of_parents: int
    new_individuals: int
    overfill: int
    similarity: str
    crossover: Tuple[str, Dict[str, Any]]
    mutation: Tuple[str, Dict[str, Any]]
    generations: int = 250
    repair: Optional[Tuple[str, Dict[str, Any]]] = None


class MOEADConfig:
    """
    Declarative configuration holder for MOEA/D settings.

    Examples:
        # Fluent builder
        cfg = MOEADConfig().num_objectives(2).num_problems(30).neighborhood_size(10)...fixed()

        # Quick default configuration
        cfg = MOEADConfig.default(num_objectives=2)

        # From dictionary
        cfg = MOEADConfig.from_dict({"num_objectives": 2, "num_problems": 30})
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(
        cls,
        num_objectives: int = 5,
        num_problems: int = 20,
        generations: int = 250,
    ) -> "MOEADConfigData":
        """Create a default MOEA/D configuration with sensible defaults."""
        return (
            cls()
            .num_objectives(num_objectives)
            .num_problems(num_problems)
            .neighborhood_size(min(10, num_problems))
            .number_of_parents(2)
            .new_individuals(1)
            .overfill(10)
            .similarity("euclidean")
            .crossover("sbx", prob=0.95, eta=20.0)
            .mutation("pm", prob="1/n", eta=20.0)
            .generations(generations)
            .fixed()
        )

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "MOEADConfigData":
        """
        Create configuration from a dictionary.

        Missing keys fall back to :meth:`default` values.
        """
        base = cls.default(
            num_objectives=config.get("num_objectives", 5),
            num_problems=config.get("num_problems", 20),
        ).to_dict()
        builder = cls()
        for key in (
            "num_objectives",
            "num_problems",
            "neighborhood_size",
            "number_of_parents",
            "new_individuals",
            "overfill",
            "similarity",
            "generations",
        ):
            getattr(builder, key)(config.get(key, base[key]))

        for key in ("crossover", "mutation", "repair"):
            value = config.get(key, base.get(key))
            if value is None:
                continue
            if isinstance(value, (tuple, list)):
                getattr(builder, key)(value[0], **dict(value[1]))
            elif isinstance(value, dict):
                params = dict(value)
                method = params.pop("method", params.pop("type", None))
                getattr(builder, key)(method, **params)
            else:
                getattr(builder, key)(value)

        return builder.fixed()

    def num_objectives(self, value: int) -> "MOEADConfig":
        self._cfg["num_objectives"] = int(value)
        return self

    def num_problems(self, value: int) -> "MOEADConfig":
        self._cfg["num_problems"] = int(value)
        return self

    def neighborhood_size(self, value: int) -> "MOEADConfig":
        self._cfg["neighborhood_size"] = int(value)
        return self

    def number_of_parents(self, value: int) -> "MOEADConfig":
        self._cfg["number_of_parents"] = int(value)
        return self

    def new_individuals(self, value: int) -> "MOEADConfig":
        self._cfg["new_individuals"] = int(value)
        return self

    def overfill(self, value: int) -> "MOEADConfig":
        self._cfg["overfill"] = int(value)
        return self

    def similarity(self, value: str) -> "MOEADConfig":
        self._cfg["similarity"] = str(value).lower()
        return self

    def crossover(self, method: str, **kwargs) -> "MOEADConfig":
        self._cfg["crossover"] = (method, kwargs)
        return self

    def mutation(self, method: str, **kwargs) -> "MOEADConfig":
        self._cfg["mutation"] = (method, kwargs)
        return self

    def repair(self, method: str, **kwargs) -> "MOEADConfig":
        self._cfg["repair"] = (method, kwargs)
        return self

    def generations(self, value: int) -> "MOEADConfig":
        self._cfg["generations"] = int(value)
        return self

    def fixed(self) -> MOEADConfigData:
        _require_fields(
            self._cfg,
            (
                "num_objectives",
                "num_problems",
                "neighborhood_size",
                "number_of_parents",
                "new_individuals",
                "overfill",
                "crossover",
                "mutation",
            ),
            "MOEADConfig",
        )
        return MOEADConfigData(
            num_objectives=self._cfg["num_objectives"],
            num_problems=self._cfg["num_problems"],
            neighborhood_size=self._cfg["neighborhood_size"],
            number_of_parents=self._cfg["number_of_parents"],
            new_individuals=self._cfg["new_individuals"],
            overfill=self._cfg["overfill"],
            similarity=self._cfg.get("similarity", "euclidean"),
            crossover=self._cfg["crossover"],
            mutation=self._cfg["mutation"],
            generations=self._cfg.get("generations", 250),
            repair=self._cfg.get("repair"),
        )
