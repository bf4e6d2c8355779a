"""Configuration records for the break-even and pricing engine.

Every record is a frozen dataclass and every sequence is a tuple, so a
``BepConfig`` is an immutable snapshot that can be handed to any number of
calculations at once.

``from_dict`` accepts the snake_case layout written by ``to_dict`` and the
older camelCase store documents, where the incidences sit flat at the root
and product-mix categories use the Italian field names.
"""
import math
from dataclasses import dataclass, field, asdict
from typing import Optional, Tuple

from config.default_params import (
    DEFAULT_INCIDENCE, DEFAULT_PRODUCT_MIX, DEFAULT_BEP_CONFIG,
    DEFAULT_FIXED_COST_CATEGORY,
)


def _pick(data: dict, *keys, default=None):
    """First value present in ``data`` under any of ``keys``"""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _as_float(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


@dataclass(frozen=True)
class FixedCostItem:
    id: str
    label: str
    amount: float = 0.0
    category: str = DEFAULT_FIXED_COST_CATEGORY

    @classmethod
    def from_dict(cls, data: dict) -> "FixedCostItem":
        return cls(
            id=str(_pick(data, 'id', default='')),
            label=str(_pick(data, 'label', default='')),
            amount=_as_float(_pick(data, 'amount', default=0.0), 'amount'),
            category=str(_pick(data, 'category', default=DEFAULT_FIXED_COST_CATEGORY)),
        )


@dataclass(frozen=True)
class Employee:
    id: str
    monthly_salary: float = 0.0
    contribution_percentage: float = 0.0  # employer contributions, % of salary
    first_name: str = ""
    last_name: str = ""
    department: str = ""

    @property
    def monthly_cost(self) -> float:
        return self.monthly_salary * (1 + self.contribution_percentage / 100)

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        return cls(
            id=str(_pick(data, 'id', default='')),
            monthly_salary=_as_float(
                _pick(data, 'monthly_salary', 'monthlySalary', default=0.0), 'monthly_salary'),
            contribution_percentage=_as_float(
                _pick(data, 'contribution_percentage', 'contributionPercentage', default=0.0),
                'contribution_percentage'),
            first_name=str(_pick(data, 'first_name', 'firstName', default='')),
            last_name=str(_pick(data, 'last_name', 'lastName', default='')),
            department=str(_pick(data, 'department', default='')),
        )


@dataclass(frozen=True)
class VariableIncidenceConfig:
    # all values are percentages of revenue
    food_cost_incidence: float = DEFAULT_INCIDENCE['food_cost_incidence']
    service_incidence: float = DEFAULT_INCIDENCE['service_incidence']
    waste_incidence: float = DEFAULT_INCIDENCE['waste_incidence']
    delivery_enabled: bool = DEFAULT_INCIDENCE['delivery_enabled']
    delivery_incidence: float = DEFAULT_INCIDENCE['delivery_incidence']

    @classmethod
    def from_dict(cls, data: dict) -> "VariableIncidenceConfig":
        return cls(
            food_cost_incidence=_as_float(_pick(
                data, 'food_cost_incidence', 'foodCostIncidence',
                default=DEFAULT_INCIDENCE['food_cost_incidence']), 'food_cost_incidence'),
            service_incidence=_as_float(_pick(
                data, 'service_incidence', 'serviceIncidence',
                default=DEFAULT_INCIDENCE['service_incidence']), 'service_incidence'),
            waste_incidence=_as_float(_pick(
                data, 'waste_incidence', 'wasteIncidence',
                default=DEFAULT_INCIDENCE['waste_incidence']), 'waste_incidence'),
            delivery_enabled=bool(_pick(
                data, 'delivery_enabled', 'deliveryEnabled',
                default=DEFAULT_INCIDENCE['delivery_enabled'])),
            delivery_incidence=_as_float(_pick(
                data, 'delivery_incidence', 'deliveryIncidence',
                default=DEFAULT_INCIDENCE['delivery_incidence']), 'delivery_incidence'),
        )


@dataclass(frozen=True)
class VariableCostFlags:
    packaging: bool = False
    waste: bool = False
    delivery: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "VariableCostFlags":
        return cls(
            packaging=bool(_pick(data, 'packaging', default=False)),
            waste=bool(_pick(data, 'waste', 'sfrido', default=False)),
            delivery=bool(_pick(data, 'delivery', default=False)),
        )


@dataclass(frozen=True)
class RevenueCategory:
    id: str
    name: str
    revenue_share_percent: float = 0.0
    average_price: float = 0.0
    volume_unit_ratio: float = 1.0    # units sold per cover
    food_cost_target: float = 0.0     # informational only
    variable_cost_flags: VariableCostFlags = field(default_factory=VariableCostFlags)
    emoji: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "RevenueCategory":
        flags = _pick(data, 'variable_cost_flags', 'costiVariabili', default={})
        if not isinstance(flags, dict):
            raise TypeError("variable_cost_flags must be a mapping")
        return cls(
            id=str(_pick(data, 'id', default='')),
            name=str(_pick(data, 'name', 'nome', default='')),
            revenue_share_percent=_as_float(_pick(
                data, 'revenue_share_percent', 'revenueSharePercent', 'incidenzaFatturato',
                default=0.0), 'revenue_share_percent'),
            average_price=_as_float(_pick(
                data, 'average_price', 'averagePrice', 'prezzoMedio', default=0.0),
                'average_price'),
            volume_unit_ratio=_as_float(_pick(
                data, 'volume_unit_ratio', 'volumeUnitRatio', 'volumeUnitario', default=1.0),
                'volume_unit_ratio'),
            food_cost_target=_as_float(_pick(
                data, 'food_cost_target', 'foodCostTarget', default=0.0), 'food_cost_target'),
            variable_cost_flags=VariableCostFlags.from_dict(flags),
            emoji=str(_pick(data, 'emoji', default='')),
        )


@dataclass(frozen=True)
class ProductMix:
    monthly_cover_volume: int = 0
    categories: Tuple[RevenueCategory, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'categories', tuple(self.categories))

    @classmethod
    def from_dict(cls, data: dict) -> "ProductMix":
        raw_categories = _pick(data, 'categories', 'categorie', default=[])
        if not isinstance(raw_categories, (list, tuple)):
            raise TypeError("categories must be a list")
        volume = _as_float(_pick(
            data, 'monthly_cover_volume', 'monthlyCoverVolume', 'volumeMensile', default=0),
            'monthly_cover_volume')
        return cls(
            monthly_cover_volume=int(math.floor(volume + 0.5)),
            categories=tuple(RevenueCategory.from_dict(c) for c in raw_categories),
        )


def default_product_mix() -> ProductMix:
    return ProductMix.from_dict(DEFAULT_PRODUCT_MIX)


@dataclass(frozen=True)
class BepConfig:
    fixed_costs: Tuple[FixedCostItem, ...] = ()
    variable_incidence: Optional[VariableIncidenceConfig] = None
    average_ticket: float = DEFAULT_BEP_CONFIG['average_ticket']
    product_mix: Optional[ProductMix] = None

    def __post_init__(self):
        object.__setattr__(self, 'fixed_costs', tuple(self.fixed_costs))
        if self.variable_incidence is None:
            object.__setattr__(self, 'variable_incidence', VariableIncidenceConfig())
        if self.product_mix is None:
            object.__setattr__(self, 'product_mix', default_product_mix())

    @classmethod
    def from_dict(cls, data: dict) -> "BepConfig":
        """Build a config from a store document.

        Incidences may be nested under ``variable_incidence`` or sit flat at
        the root of the document (``foodCostIncidence`` and friends).
        """
        if not isinstance(data, dict):
            raise TypeError(f"config document must be a mapping, got {type(data).__name__}")
        raw_costs = _pick(data, 'fixed_costs', 'fixedCosts', default=[])
        if not isinstance(raw_costs, (list, tuple)):
            raise TypeError("fixed_costs must be a list")
        incidence = _pick(data, 'variable_incidence', 'variableIncidence', default=data)
        raw_mix = _pick(data, 'product_mix', 'productMix')
        if not isinstance(incidence, dict):
            raise TypeError("variable_incidence must be a mapping")
        if raw_mix is not None and not isinstance(raw_mix, dict):
            raise TypeError("product_mix must be a mapping")
        return cls(
            fixed_costs=tuple(FixedCostItem.from_dict(c) for c in raw_costs),
            variable_incidence=VariableIncidenceConfig.from_dict(incidence),
            average_ticket=_as_float(_pick(
                data, 'average_ticket', 'averageTicket',
                default=DEFAULT_BEP_CONFIG['average_ticket']), 'average_ticket'),
            product_mix=ProductMix.from_dict(raw_mix) if raw_mix is not None else None,
        )

    def to_dict(self) -> dict:
        return asdict(self)


def default_config() -> BepConfig:
    return BepConfig.from_dict(DEFAULT_BEP_CONFIG)
