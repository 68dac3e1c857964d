"""core/defaults.py

Starter data loaded by ``seed_defaults``, in backup-file shape so it goes
through the same import path as an uploaded backup.
"""


def _months(**values):
    months = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
    return {m: values.get(m, 0) for m in months}


DEFAULT_COMMODITIES = [
    {
        "id": 1,
        "name": "Romaine",
        "varieties": [
            {
                "id": 1,
                "name": "Green Forest",
                "growingWindow": {"start": "Mar", "end": "Nov"},
                "daysToHarvest": 60,
                "bedSize": "38-2",
                "spacing": "12in",
                "plantType": "Transplant",
                "idealStand": 30000,
                "marketTypes": ["Fresh Cut"],
                "budgetYieldPerAcre": {"Fresh Cut": 1200, "Bulk": 0},
                "preferences": _months(Mar=10, Apr=15, May=20, Jun=20, Jul=15, Aug=10, Sep=5, Oct=5),
            },
            {
                "id": 2,
                "name": "Parris Island Cos",
                "growingWindow": {"start": "Apr", "end": "Oct"},
                "daysToHarvest": 58,
                "bedSize": "38-2",
                "spacing": "12in",
                "plantType": "Transplant",
                "idealStand": 32000,
                "marketTypes": ["Fresh Cut", "Bulk"],
                "budgetYieldPerAcre": {"Fresh Cut": 1100, "Bulk": 25000},
                "preferences": _months(Mar=5, Apr=20, May=25, Jun=25, Jul=15, Aug=10),
            },
        ],
    },
    {
        "id": 2,
        "name": "Iceberg",
        "varieties": [
            {
                "id": 3,
                "name": "Great Lakes",
                "growingWindow": {"start": "Apr", "end": "Oct"},
                "daysToHarvest": 65,
                "bedSize": "38-2",
                "spacing": "12in",
                "plantType": "Transplant",
                "idealStand": 28000,
                "marketTypes": ["Fresh Cut"],
                "budgetYieldPerAcre": {"Fresh Cut": 1000, "Bulk": 0},
                "preferences": _months(Apr=20, May=25, Jun=25, Jul=20, Aug=10),
            },
        ],
    },
    {
        "id": 3,
        "name": "Carrots",
        "varieties": [
            {
                "id": 4,
                "name": "Nantes",
                "growingWindow": {"start": "Feb", "end": "Nov"},
                "daysToHarvest": 90,
                "bedSize": "38-2",
                "spacing": "2in",
                "plantType": "Direct Seed",
                "idealStand": 500000,
                "marketTypes": ["Bulk"],
                "budgetYieldPerAcre": {"Fresh Cut": 0, "Bulk": 45000},
                "preferences": _months(Feb=10, Mar=15, Apr=15, May=15, Jun=15, Jul=15, Aug=10, Sep=5),
            },
        ],
    },
]

DEFAULT_LAND = [
    {
        "id": 1,
        "region": "Salinas",
        "ranches": [
            {
                "id": 1,
                "name": "North Ranch",
                "lots": [
                    {"id": 1, "number": "1", "acres": 25, "soilType": "Sandy Loam", "lastCrop": "Lettuce", "lastPlantDate": "2024-08-15", "microclimate": "Cool"},
                    {"id": 2, "number": "2", "acres": 30, "soilType": "Clay Loam", "lastCrop": "Carrots", "lastPlantDate": "2024-06-01", "microclimate": "Cool"},
                    {"id": 3, "number": "3", "acres": 20, "soilType": "Sandy Loam", "lastCrop": "Broccoli", "lastPlantDate": "2024-07-10", "microclimate": "Moderate"},
                ],
            },
            {
                "id": 2,
                "name": "South Ranch",
                "lots": [
                    {"id": 4, "number": "1", "acres": 35, "soilType": "Clay Loam", "lastCrop": "Spinach", "lastPlantDate": "2024-05-20", "microclimate": "Warm"},
                    {"id": 5, "number": "2", "acres": 28, "soilType": "Sandy Loam", "lastCrop": "Lettuce", "lastPlantDate": "2024-09-01", "microclimate": "Warm"},
                ],
            },
        ],
    },
    {
        "id": 2,
        "region": "Yuma",
        "ranches": [
            {
                "id": 3,
                "name": "Desert Ranch",
                "lots": [
                    {"id": 6, "number": "1", "acres": 40, "soilType": "Sandy", "lastCrop": "Cauliflower", "lastPlantDate": "2024-11-15", "microclimate": "Hot"},
                    {"id": 7, "number": "2", "acres": 32, "soilType": "Sandy", "lastCrop": "Cabbage", "lastPlantDate": "2024-12-01", "microclimate": "Hot"},
                ],
            },
        ],
    },
]

DEFAULT_ORDERS = [
    {"id": 1, "customer": "Fresh Farms Co", "commodity": "Romaine", "volume": 10000, "marketType": "Fresh Cut", "deliveryDate": "2025-09-15", "isWeekly": False},
    {"id": 2, "customer": "Valley Produce", "commodity": "Carrots", "volume": 50000, "marketType": "Bulk", "deliveryDate": "2025-10-01", "isWeekly": True},
    {"id": 3, "customer": "Premium Greens", "commodity": "Iceberg", "volume": 7500, "marketType": "Fresh Cut", "deliveryDate": "2025-08-20", "isWeekly": False},
    {"id": 4, "customer": "Green Valley Co", "commodity": "Romaine", "volume": 8000, "marketType": "Fresh Cut", "deliveryDate": "2025-08-30", "isWeekly": False},
    {"id": 5, "customer": "Desert Fresh", "commodity": "Carrots", "volume": 30000, "marketType": "Bulk", "deliveryDate": "2025-11-15", "isWeekly": False},
    {"id": 6, "customer": "Coastal Greens", "commodity": "Iceberg", "volume": 12000, "marketType": "Fresh Cut", "deliveryDate": "2025-09-01", "isWeekly": False},
]


def default_backup():
    return {
        "orders": DEFAULT_ORDERS,
        "commodities": DEFAULT_COMMODITIES,
        "landStructure": DEFAULT_LAND,
        "plantings": [],
    }
