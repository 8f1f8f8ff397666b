APP_TITLE = "Priority Lanes: Market Carrier Analysis"
APP_SUBTITLE = "Carrier performance comparison across priority routes based on market transit data"

CARRIER_COL = "carrier_name"
LANE_COL = "port_2_port_id"
TRANSIT_HOURS_COL = "transit_time"
EXPECTED_COLS = [CARRIER_COL, LANE_COL, TRANSIT_HOURS_COL]

HOURS_PER_DAY = 24
DEFAULT_DATA_PATH = "data/maritime_shipment_data.csv"

# Position in this list is the lane rank (1-based)
PRIORITY_LANES = [
    "CNYTN--USSEA",
    "CNSHA--USSEA",
    "CNNGB--USSEA",
    "BDCGP--USNYC",
    "CNXMN--USSEA",
    "THLCH--USSEA",
    "VNSGN--USSEA",
    "CNTAO--USSEA",
    "VNHPH--USSEA",
    "INNSA--USNYC",
    "VNSGN--USLAX",
    "CNYTN--USLAX",
    "THLKR--USSEA",
    "CNSHA--USLAX",
    "CNTAO--USLAX",
    "BDCGP--USLAX",
    "PKBIN--USNYC",
    "ZADUR--USNYC",
    "INMUN--USNYC",
    "IDSIN--USSEA",
]

COUNTRY_NAMES = {
    "CN": "China",
    "US": "USA",
    "VN": "Vietnam",
    "TH": "Thailand",
    "IN": "India",
    "BD": "Bangladesh",
    "PK": "Pakistan",
    "ID": "Indonesia",
    "ZA": "South Africa",
}

PORT_NAMES = {
    "YTN": "Yantian",
    "SHA": "Shanghai",
    "SEA": "Seattle",
    "LAX": "Los Angeles",
    "NYC": "New York",
    "NGB": "Ningbo",
    "XMN": "Xiamen",
    "TAO": "Qingdao",
    "SGN": "Ho Chi Minh",
    "HPH": "Haiphong",
    "LCH": "Laem Chabang",
    "LKR": "Laem Krabang",
    "NSA": "Nhava Sheva",
    "MUN": "Mumbai",
    "CGP": "Chittagong",
    "BIN": "Karachi",
    "DUR": "Durban",
    "SIN": "Singapore",
}

GREEN = "#22c55e"
AMBER = "#f59e0b"
RED = "#ef4444"

# (upper bound in days, colour); anything above the last bound is red
TRANSIT_COLOR_BANDS = [(20, GREEN), (30, AMBER)]
# (lower bound exclusive, colour); anything at or below the last bound is red
CONSISTENCY_COLOR_BANDS = [(80, GREEN), (60, AMBER)]

KPI_FORMATS = {
    "fastest": "{:.1f} days avg. transit time",
    "most_reliable": "Serves {:,} priority lanes",
    "most_consistent": "{:.1f}/100 consistency score",
}
