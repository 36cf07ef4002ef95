"""Demo product catalogue used by DemoProductService."""

from catalog_ui.models.product import Product

DEMO_PRODUCTS: list[Product] = [
    Product(
        id=1001,
        name="Siemens SIMATIC S7-1500 CPU 1511-1 PN",
        category="PLC",
        description="Compact CPU for mid-range automation tasks, 150 KB program memory.",
        price=18_750_000,
        stock_quantity=4,
        brand="Siemens",
        accurate_code="6ES7511-1AK02-0AB0",
        unit="PCS",
        status="active",
        is_published=True,
        is_available_online=True,
    ),
    Product(
        id=1002,
        name="Siemens SIMATIC S7-1200 CPU 1214C DC/DC/DC",
        category="PLC",
        description="Compact CPU with 14 DI, 10 DO and 2 AI on board.",
        price=6_450_000,
        stock_quantity=11,
        brand="Siemens",
        accurate_code="6ES7214-1AG40-0XB0",
        unit="PCS",
        status="active",
        is_published=True,
        is_available_online=True,
    ),
    Product(
        id=1003,
        name="Siemens SINAMICS V20 Inverter 0.75 kW",
        category="Inverter",
        description="Basic frequency converter, 1AC 230V input.",
        price=None,
        stock_quantity=0,
        brand="Siemens",
        accurate_code="6SL3210-5BB17-5UV1",
        unit="PCS",
        status="active",
        is_published=True,
        is_available_online=None,
    ),
    Product(
        id=1004,
        name="Siemens LOGO! 8 Basic 12/24RCE",
        category="PLC",
        description="Logic module, discontinued by the distributor.",
        price=2_100_000,
        stock_quantity=2,
        brand="Siemens",
        accurate_code="6ED1052-1MD08-0BA1",
        unit="PCS",
        status="suspended",
        is_published=True,
        is_available_online=True,
    ),
    Product(
        id=2001,
        name="Schneider TeSys D Contactor LC1D09M7",
        category="Contactor",
        description="3P contactor, 9 A, 220 VAC coil.",
        price=425_000,
        stock_quantity=120,
        brand="Schneider Electric",
        accurate_code="LC1D09M7",
        unit="PCS",
        status="active",
        is_published=True,
        is_available_online=True,
    ),
    Product(
        id=2002,
        name="Schneider Acti9 iC60N MCB 1P 16A",
        category="Circuit Breaker",
        description="Miniature circuit breaker, C curve, 6 kA.",
        price=0,
        stock_quantity=300,
        brand="Schneider Electric",
        accurate_code="A9F74116",
        unit="PCS",
        status="active",
        is_published=True,
        is_available_online=True,
    ),
    Product(
        id=2003,
        name="Schneider Altivar Machine ATV320 2.2 kW",
        category="Inverter",
        description="Variable speed drive for complex machines.",
        price=9_980_000,
        stock_quantity=1,
        brand="Schneider Electric",
        accurate_code="ATV320U22N4B",
        unit="PCS",
        status="active",
        is_published=True,
        is_available_online=False,
    ),
    Product(
        id=3001,
        name="Omron E3Z-D61 Photoelectric Sensor",
        category="Sensor",
        description="Diffuse-reflective sensor, 100 mm sensing distance.",
        price=1_150_000,
        stock_quantity=25,
        brand="Omron",
        accurate_code="E3Z-D61",
        unit="PCS",
        status="active",
        is_published=True,
        is_available_online=True,
    ),
    Product(
        id=3002,
        name="Omron H3CR-A8 Timer",
        category="Timer",
        description="Multifunction timer, 100-240 VAC.",
        price=1_375_000,
        stock_quantity=0,
        brand="Omron",
        accurate_code="H3CR-A8",
        unit="PCS",
        status="active",
        is_published=True,
        is_available_online=True,
    ),
    Product(
        id=4001,
        name="Mitsubishi FR-D720S Inverter 0.4 kW",
        category="Inverter",
        description="Compact inverter, single-phase 200V class.",
        price=3_200_000,
        stock_quantity=6,
        brand="Mitsubishi Electric",
        accurate_code="FR-D720S-025-EC",
        unit="PCS",
        status="active",
        is_published=False,
        is_available_online=True,
    ),
    Product(
        id=5001,
        name="Phoenix Contact UT 4 Feed-through Terminal Block",
        category="Terminal Block",
        description="Screw connection, 4 mm², grey.",
        price=18_500,
        stock_quantity=2000,
        brand="Phoenix Contact",
        accurate_code="3044102",
        unit="PCS",
        status="active",
        is_published=True,
        is_available_online=True,
    ),
]
