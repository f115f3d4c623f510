# product_service/main.py
from fastapi import FastAPI

app = FastAPI(title="Product Service (dev mock)")

_ACME = {
    "id": "7d0f4a4e-2b8c-4f7e-9a1d-3c5b6e8f9a01",
    "name": "Acme Peripherals",
    "address": "1 Market Street",
    "contact": "sales@acme.example",
}

PRODUCTS = [
    {
        "id": "0b6c1f3e-5a2d-4c8b-9e7f-1a2b3c4d5e01",
        "name": "Keyboard",
        "description": "Mechanical keyboard, brown switches",
        "price": "199.99",
        "manufacturer": _ACME,
        "categories": ["ELECTRONICS"],
        "reviews": [
            {
                "reviewer_name": "Ann",
                "comment": "Loud but great",
                "rating": 5,
                "review_date": "2024-03-01T10:00:00Z",
            }
        ],
        "created_at": "2024-01-10T08:00:00Z",
        "updated_at": "2024-02-01T08:00:00Z",
    },
    {
        "id": "0b6c1f3e-5a2d-4c8b-9e7f-1a2b3c4d5e02",
        "name": "Mouse",
        "description": "Wireless mouse",
        "price": "49.50",
        "manufacturer": _ACME,
        "categories": ["ELECTRONICS"],
        "reviews": [],
        "created_at": "2024-01-10T08:00:00Z",
        "updated_at": "2024-01-10T08:00:00Z",
    },
    {
        "id": "0b6c1f3e-5a2d-4c8b-9e7f-1a2b3c4d5e03",
        "name": "Monitor",
        "description": "27 inch IPS monitor",
        "price": "899.00",
        "manufacturer": None,
        "categories": ["ELECTRONICS", "OFFICE"],
        "reviews": [],
        "created_at": "2024-01-12T08:00:00Z",
        "updated_at": "2024-01-12T08:00:00Z",
    },
]


@app.get("/products")
def list_products():
    return PRODUCTS
