from dataclasses import dataclass
from typing import List


@dataclass
class CategoryDTO:
    id: int
    name: str


@dataclass
class ProductDTO:
    id: int
    name: str
    description: str
    price: int
    images: List[str]
    category: str


"""DTO dataclasses only. Mapping logic lives in mappers.py."""
