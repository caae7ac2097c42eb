from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BeforeValidator, StringConstraints

from app.utils.amounts import to_amount, to_count, to_text
from app.utils.months import MONTH_KEY_PATTERN, as_utc

# Tipos con coerción: lo no numérico vale 0, None en texto vale ""
Amount = Annotated[float, BeforeValidator(to_amount)]
Count = Annotated[int, BeforeValidator(to_count)]
Text = Annotated[str, BeforeValidator(to_text)]

UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]

MonthKey = Annotated[str, StringConstraints(pattern=MONTH_KEY_PATTERN)]
OptionalMonthKey = Optional[MonthKey]
