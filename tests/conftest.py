"""Shared fixtures: a small catalog, inventory and a month of business."""

import pytest


@pytest.fixture
def catalog():
    return {
        "categories": [
            {
                "id": "frames",
                "name": "Photo Frames",
                "items": [
                    {"id": 7, "name": "Frame A2", "price": 1500},
                    {"id": "8", "name": "Frame B", "price": 900},
                ],
            },
            {
                "id": "mugs",
                "name": "Mugs",
                "items": [{"id": "21", "name": "Magic Mug", "price": 1200}],
            },
        ]
    }


@pytest.fixture
def inventory():
    return [
        {"id": "7", "itemName": "Frame A (stock)", "category": "Frames",
         "currentStock": 5, "reorderLevel": 10, "unitCost": 400},
        {"id": 21, "itemName": "Magic Mug", "category": "Drinkware",
         "currentStock": "40", "reorderLevel": 0, "unitCost": "300"},
        {"id": "99", "itemName": "Gift Box", "category": "Packaging",
         "currentStock": 0, "reorderLevel": 5, "unitCost": 50, "unit": "pcs"},
    ]


@pytest.fixture
def orders():
    return [
        {
            "id": "ORD-1", "orderDate": "2024-01-05", "createdDate": "2024-01-05",
            "dispatchDate": "2024-01-07", "status": "Dispatched", "paymentStatus": "Paid",
            "orderSource": "Facebook", "totalPrice": 3200, "district": "Colombo",
            "whatsapp": "+94 77 123 4567", "customerName": "Kamal",
            "orderItems": [
                {"itemId": 7, "categoryId": "frames", "quantity": 2, "unitPrice": 1500},
                {"customItemName": "Gift Wrap", "quantity": 1, "unitPrice": 200},
            ],
        },
        {
            "id": "ORD-2", "orderDate": "2024-01-20", "createdDate": "2024-01-20",
            "status": "Pending", "paymentStatus": "Pending", "orderSource": "Instagram",
            "totalPrice": "1200", "district": "Kandy", "phone": "071 555 0000",
            "customerName": "Sara",
            "orderItems": [{"itemId": "21", "quantity": 1, "unitPrice": 1200}],
        },
        {
            # legacy single-item record
            "id": "ORD-3", "orderDate": "2024-01-25", "createdDate": "2024-01-25",
            "status": "Cancelled", "paymentStatus": "Paid", "totalAmount": 2400,
            "district": "Colombo", "customerName": "Nimal",
            "itemId": 21, "quantity": 2, "unitPrice": 1200,
        },
        {
            "id": "ORD-4", "orderDate": "2024-02-02", "createdDate": "2024-02-02",
            "status": "New Order", "paymentStatus": "Paid", "orderSource": "Facebook",
            "totalPrice": 1500, "district": "Colombo", "whatsapp": "94771234567",
            "customerName": "Kamal",
            "orderItems": [{"itemId": "7", "quantity": 1, "unitPrice": 1500}],
        },
    ]


@pytest.fixture
def expenses():
    return [
        {"id": "EXP-1", "date": "2024-01-03", "category": "Ads", "item": "Facebook", "amount": 500},
        {"id": "EXP-2", "date": "2024-01-10", "category": "Materials", "item": "Glue", "amount": "150"},
        {"id": "EXP-3", "date": "2024-02-01", "category": "Rent", "description": "Workshop", "amount": 1000},
    ]
