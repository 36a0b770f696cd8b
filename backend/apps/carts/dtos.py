from dataclasses import dataclass
from typing import List


@dataclass
class CartItemDTO:
    # Product identifier, exposed to clients as the line id
    id: int
    name: str
    price: int
    images: List[str]
    quantity: int
