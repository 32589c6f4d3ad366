"""
Pydantic schemas for products.

``Product`` is the entity persisted in the ``products`` table and
returned by every read endpoint.  ``ProductPayload`` is the request
body accepted by create and update; every field is optional so that
decoding never fails on a merely incomplete body.  Field constraints
are checked separately by :func:`validate_product`, which keeps the
rules usable outside of the HTTP layer.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

# matches the DECIMAL(20, 2) price column
PRICE_PLACES = 2


class Product(BaseModel):
    """A product in the catalog."""

    id: Optional[int] = Field(None, description="Identifier assigned by storage on creation")
    title: str = Field("", description="Product title")
    description: str = Field("", description="Product description")
    price: float = Field(0.0, description="Unit price, strictly positive")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


class ProductPayload(BaseModel):
    """Schema for creating or updating a product.

    Empty strings and a zero price are treated the same as an absent
    field: on create they fail validation, on update they leave the
    stored value untouched.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, allow_inf_nan=False)

    def to_product(self) -> Product:
        return Product(
            title=self.title or "",
            description=self.description or "",
            price=self.price or 0.0,
        )

    def apply_to(self, product: Product) -> Product:
        """Return a copy of ``product`` with the supplied fields overlaid."""
        changes = {}
        if self.title:
            changes["title"] = self.title
        if self.description:
            changes["description"] = self.description
        if self.price:
            changes["price"] = self.price
        return product.model_copy(update=changes)


@dataclass(frozen=True)
class FieldError:
    """A single failed constraint on a product field."""

    field: str
    rule: str

    @property
    def message(self) -> str:
        return "Field validation for '%s' failed on the '%s' tag" % (self.field, self.rule)


def validate_product(draft: Product) -> List[FieldError]:
    """Check ``draft`` against the product constraints.

    Errors are reported in declaration order: ``title``,
    ``description``, then ``price``.  A zero price counts as missing
    (``required``).  A price that is not finite, or that rounds to
    zero or below at two decimal places, fails the ``gt`` rule.
    """
    errors: List[FieldError] = []
    if not draft.title:
        errors.append(FieldError("title", "required"))
    if not draft.description:
        errors.append(FieldError("description", "required"))
    if not draft.price:
        errors.append(FieldError("price", "required"))
    elif not math.isfinite(draft.price) or round(draft.price, PRICE_PLACES) <= 0:
        errors.append(FieldError("price", "gt"))
    return errors
