from pydantic import BaseModel, ConfigDict
from typing import Optional

class DailyRecordIn(BaseModel):
    # all optional: PATCH only touches what is sent
    model_config = ConfigDict(allow_inf_nan=False)
    input_quantity: Optional[float] = None
    output_quantity: Optional[float] = None
    unit_price_input: Optional[float] = None
    unit_price_output: Optional[float] = None
    note: Optional[str] = None

class MaterialOut(BaseModel):
    material_type: str
    label: str
    unit: str
    input_label: str
    default_price_input: float
    default_price_output: float
