"""Static catalog: task categories with their subcategories, and task statuses."""

CATEGORY_MAP = {
    "Legal": [
        "Lease Agreements",
        "Vacating Notice",
        "Letter to tenants",
        "Employees letters",
        "Contract reviews",
        "New Contracts Binding",
        "Legal documents",
        "Verification of documents",
    ],
    "Customer Service": [
        "Complaints/Issues",
        "Repairs",
        "Follow-up on late payments",
    ],
    "Accounts": [
        "Payment Reconciliation",
        "Payment to Suppliers",
        "Payment to Contractors",
        "Petty Cash Reconciliation",
        "Sales Reconciliation (Jatflora) ETR",
        "Mumbu ETR Jatflora",
        "Data Entry in QuickBooks (Jatflora)",
        "Office Supplies",
        "Accounting Activities",
    ],
    "Security": [
        "Access update",
        "Emergency updates",
        "Incident Reports",
        "Security notifications",
    ],
    "Potential Tenants": [
        "Scheduling Appointments",
        "Follow-up with the potential client",
        "Processing Documents",
        "Onboarding process",
    ],
    "HR": [
        "Onboarding Staff",
        "Annual Leave",
        "Staff Welfare",
        "Sick Leave",
        "Staff Request",
        "Staff Occupation equipments",
    ],
    "Suppliers": [
        "Receiving Invoices",
        "Processing Invoices",
        "Scheduling Services",
        "Addressing concerns",
        "Quotation review & Examination",
    ],
    "Contractors": [
        "Scheduling Assessment",
        "Scheduling Repairs",
        "Follow-up for Invoices and Quotations",
        "Follow-up on repairs",
        "Verification of the job done",
        "Report to Director",
    ],
}

# ---------- Statuses ----------
STATUS_TODO = 1
STATUS_PENDING = 2
STATUS_DONE = 3
STATUS_ON_HOLD = 4

STATUSES = {
    STATUS_TODO: "To Do",
    STATUS_PENDING: "Pending",
    STATUS_DONE: "Done",
    STATUS_ON_HOLD: "On Hold",
}

STATUS_COLORS = {
    STATUS_TODO: {"bg": "#7c3aed", "text": "#ffffff"},
    STATUS_PENDING: {"bg": "#f59e0b", "text": "#0b0b0b"},
    STATUS_DONE: {"bg": "#10b981", "text": "#ffffff"},
    STATUS_ON_HOLD: {"bg": "#2563eb", "text": "#ffffff"},
}


def status_name(status_id: int) -> str:
    return STATUSES.get(status_id, "Unknown")


def catalog() -> dict:
    """Catalog in the shape the client renders its pickers from."""
    return {
        "categories": CATEGORY_MAP,
        "statuses": [
            {"id": sid, "name": name, "colors": STATUS_COLORS[sid]}
            for sid, name in STATUSES.items()
        ],
    }
