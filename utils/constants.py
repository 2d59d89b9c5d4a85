APP_NAME = "Expense Tracker"
APP_WIDTH = 1100
APP_HEIGHT = 720

DEFAULT_API_URL = "http://localhost:5000"
SESSION_COOKIE_NAME = "connect.sid"
REQUEST_TIMEOUT = 10  # seconds

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"
DEFAULT_DISPLAY_DATE_FORMAT = "DD/MM/YYYY"
DATE_FORMAT_OPTIONS = ["DD/MM/YYYY", "MM/DD/YYYY", "YYYY-MM-DD", "DD.MM.YYYY"]
CURRENCY_SYMBOL = "₹"

CATEGORY_TYPES = ("income", "expense")
FALLBACK_CATEGORY_TYPE = "expense"
FALLBACK_CATEGORY_COLOR = "#95a5a6"
OTHER_CATEGORY = "Other"

SUBMIT_LABEL_CREATE = "Add transaction"
SUBMIT_LABEL_EDIT = "Update transaction"
OUT_OF_PERIOD_NOTICE = "Transaction added! Switch month to view it."

EXPORT_FILE_PREFIX = "Expense_Tracker"
EXPORT_SHEET_TITLE = "Report"

# Used when the category endpoint is unreachable.
DEFAULT_CATEGORIES = [
    {"name": "Food",           "type": "expense", "color_hex": "#e74c3c"},
    {"name": "Income",         "type": "income",  "color_hex": "#27ae60"},
    {"name": "Borrow From",    "type": "income",  "color_hex": "#8e44ad"},
    {"name": "EMI",            "type": "expense", "color_hex": "#f1c40f"},
    {"name": "Daily Expenses", "type": "expense", "color_hex": "#9b59b6"},
    {"name": "Savings",        "type": "expense", "color_hex": "#2ecc71"},
    {"name": "Grocery",        "type": "expense", "color_hex": "#e67e22"},
    {"name": "Snacks",         "type": "expense", "color_hex": "#d35400"},
    {"name": "School Fee",     "type": "expense", "color_hex": "#3498db"},
    {"name": "Medical",        "type": "expense", "color_hex": "#1abc9c"},
    {"name": "Petrol",         "type": "expense", "color_hex": "#34495e"},
    {"name": "Loan",           "type": "expense", "color_hex": "#7f8c8d"},
    {"name": "Other",          "type": "expense", "color_hex": "#ecf0f1"},
]

SEVERITY_COLORS = {
    "error":   "#F44336",
    "warning": "#FF9800",
    "info":    "#2196F3",
}

INCOME_COLOR = "#27ae60"
EXPENSE_COLOR = "#e74c3c"
