from dataclasses import dataclass

from app.errors import UnknownMaterial
from app.models.core import MaterialType


@dataclass(frozen=True)
class MaterialSpec:
    type: MaterialType
    label: str
    unit: str
    input_label: str
    default_price_input: float    # VND per unit received
    default_price_output: float   # VND per unit shipped


MATERIALS: dict[MaterialType, MaterialSpec] = {
    MaterialType.TOFU: MaterialSpec(MaterialType.TOFU, "tofu", "kg", "soybeans", 12000, 15000),
    MaterialType.PICKLED_VEGETABLE: MaterialSpec(MaterialType.PICKLED_VEGETABLE, "pickled vegetables", "kg", "cabbage", 8000, 12000),
    MaterialType.BEAN_SPROUTS: MaterialSpec(MaterialType.BEAN_SPROUTS, "bean sprouts", "kg", "soybeans", 12000, 12000),
    MaterialType.SAUSAGE: MaterialSpec(MaterialType.SAUSAGE, "sausage", "kg", "pork", 120000, 150000),
    MaterialType.POULTRY_MEAT: MaterialSpec(MaterialType.POULTRY_MEAT, "poultry meat", "kg", "live poultry", 60000, 150000),
    MaterialType.LIVESTOCK_MEAT: MaterialSpec(MaterialType.LIVESTOCK_MEAT, "livestock meat", "kg", "live pigs", 70000, 160000),
}


def resolve_material(value: str | MaterialType) -> MaterialSpec:
    """Look up a material by enum or by its wire value ("tofu", "poultryMeat", ...)."""
    if isinstance(value, MaterialType):
        return MATERIALS[value]
    try:
        return MATERIALS[MaterialType(value)]
    except ValueError:
        raise UnknownMaterial(f"unknown material type: {value}")
