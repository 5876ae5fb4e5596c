# finloan/loan_catalog.py

"""
Default loan products loaded into the ``services`` collection by
``scripts/seed_catalog.py``. The API never writes to the catalog; edit
this list and re-run the script to add products.

``interestRate`` is a whole-number percent per tenure unit.
"""

DEFAULT_LOAN_SERVICES = [
    {
        "type": "personal",
        "description": "Unsecured personal loan for everyday needs",
        "interestRate": 10,
        "maxAmount": 500000,
        "tenure": 60,
        "imgUrl": "/images/personal.png",
    },
    {
        "type": "home",
        "description": "Home purchase and renovation loan",
        "interestRate": 8,
        "maxAmount": 5000000,
        "tenure": 240,
        "imgUrl": "/images/home.png",
    },
    {
        "type": "vehicle",
        "description": "New and used vehicle financing",
        "interestRate": 9,
        "maxAmount": 1500000,
        "tenure": 84,
        "imgUrl": "/images/vehicle.png",
    },
    {
        "type": "business",
        "description": "Working capital for small businesses",
        "interestRate": 12,
        "maxAmount": 2000000,
        "tenure": 36,
        "imgUrl": "/images/business.png",
    },
    {
        "type": "gold",
        "description": "Loan against gold jewellery",
        "interestRate": 7,
        "maxAmount": 1000000,
        "tenure": 12,
        "imgUrl": "/images/gold.png",
    },
]


async def seed_catalog(store, products=None) -> list:
    """Insert every product whose ``type`` is not yet in the store. Returns the inserted types."""
    from finloan.database.store import SERVICES

    inserted = []
    for product in products if products is not None else DEFAULT_LOAN_SERVICES:
        existing = await store.find_one(SERVICES, {"type": product["type"]})
        if existing:
            continue
        await store.insert(SERVICES, dict(product))
        inserted.append(product["type"])
    return inserted
