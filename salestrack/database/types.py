from decimal import Decimal, InvalidOperation

from sqlalchemy import DateTime, Numeric, String
from sqlalchemy.types import TypeDecorator

from salestrack.core.dates import to_utc


class UTCDateTime(TypeDecorator):
    """Timezone-aware timestamp that always round-trips as UTC.

    SQLite drops the offset on write, so values read back are re-tagged.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return to_utc(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return to_utc(value)


class ExactDecimal(TypeDecorator):
    """Fixed-scale decimal stored without binary rounding.

    SQLite has no decimal storage class and keeps NUMERIC as REAL, so there
    the value is written as its canonical string. Other backends use NUMERIC.
    """

    impl = Numeric
    cache_ok = True

    def __init__(self, precision=18, scale=4):
        super().__init__(precision=precision, scale=scale, asdecimal=True)
        self.precision = precision
        self.scale = scale
        self._quantum = Decimal(1).scaleb(-scale)

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(self.precision + 2))
        return dialect.type_descriptor(Numeric(self.precision, self.scale, asdecimal=True))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = Decimal(str(value))
        try:
            quantized = value.quantize(self._quantum)
        except InvalidOperation as exc:
            raise ValueError("{} does not fit NUMERIC({}, {})".format(value, self.precision, self.scale)) from exc
        if quantized != value:
            raise ValueError("{} has more than {} decimal places".format(value, self.scale))
        if len(quantized.as_tuple().digits) > self.precision:
            raise ValueError("{} has more than {} digits".format(value, self.precision))
        if dialect.name == "sqlite":
            return str(quantized)
        return quantized

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(str(value))


__all__ = ["ExactDecimal", "UTCDateTime"]
