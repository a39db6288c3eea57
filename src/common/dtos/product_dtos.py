"""Data Transfer Objects for catalog products."""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

ProductId = Union[int, str]


@dataclass(frozen=True)
class ProductDTO:
    """Immutable product snapshot, shared safely between the catalog, the cart and favorites."""

    id: ProductId
    title: str = ""
    brand: Optional[str] = None
    thumbnail_url: Optional[str] = None
    price: float = 0.0
    category: Optional[str] = None
    description: Optional[str] = None
    discount_percentage: Optional[float] = None
    rating: Optional[float] = None
    stock: Optional[int] = None
    images: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.id is None:
            raise ValueError("Product id is required.")
        if isinstance(self.id, bool) or not isinstance(self.id, (int, str)):
            raise ValueError(f"Product id must be an int or a string, got {type(self.id).__name__}.")
        if self.price is None or self.price < 0:
            raise ValueError("Price cannot be negative.")

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "ProductDTO":
        """Creates a ProductDTO from a dummyjson product record (or a stored snapshot of one)."""
        images = data.get("images") or []
        return cls(
            id=data.get("id"),
            title=data.get("title") or "",
            brand=data.get("brand"),
            thumbnail_url=data.get("thumbnail"),
            price=float(data.get("price") or 0),
            category=data.get("category"),
            description=data.get("description"),
            discount_percentage=data.get("discountPercentage"),
            rating=data.get("rating"),
            stock=data.get("stock"),
            images=tuple(img for img in images if isinstance(img, str)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serializes to the same camelCase shape the API returns."""
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "brand": self.brand,
            "thumbnail": self.thumbnail_url,
            "price": self.price,
            "category": self.category,
            "description": self.description,
            "discountPercentage": self.discount_percentage,
            "rating": self.rating,
            "stock": self.stock,
            "images": list(self.images),
        }
        return {k: v for k, v in data.items() if v is not None}


@dataclass
class CatalogPageDTO:
    """One page of products as reported by the remote catalog."""

    items: list[ProductDTO] = field(default_factory=list)
    total: int = 0
    offset: int = 0
    limit: int = 0
