from __future__ import annotations

from typing import Any, ClassVar, Tuple

from pydantic import BaseModel, ConfigDict


class ValueModel(BaseModel):
    """Frozen model whose leading fields may also be passed positionally.

    ``Add(Var("x"), Num(1))`` binds the arguments to ``positional_fields`` in
    order; everything else goes to pydantic as keywords, so a missing or
    unknown field is reported as a ``ValidationError``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    positional_fields: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, *args: Any, **data: Any) -> None:
        cls = type(self)
        if len(args) > len(cls.positional_fields):
            raise TypeError(
                f"{cls.__name__} takes at most {len(cls.positional_fields)} positional argument(s) "
                f"({len(args)} given)"
            )
        for name, arg in zip(cls.positional_fields, args):
            if name in data:
                raise TypeError(f"{cls.__name__} got multiple values for '{name}'")
            data[name] = arg
        super().__init__(**data)


__all__ = ["ValueModel"]
