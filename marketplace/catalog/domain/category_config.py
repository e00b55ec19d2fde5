"""
Product category configuration.

Each category describes the form fields a seller fills in. Select fields may
carry nested ``metadata``: per-option field lists shown once that option is
chosen (e.g. a Mobiles sub-category asks for storage capacity).
"""

import copy
from typing import Any, Dict, List

PRODUCT_CATEGORIES = [
    "Books",
    "Electronics",
    "Clothing",
    "Vehicles",
    "Accessories",
]

# Labels whose options become the first facet level of a category
FACET_LABELS = ("genre", "subCategory", "brand")
# Labels of nested fields reported as sub-options
SUB_FACET_LABELS = ("type", "subCategory", "color", "storageCapacity", "cellularTech")

STATES_INFO = [
    ["Andhra Pradesh", "AP"],
    ["Arunachal Pradesh", "AR"],
    ["Assam", "AS"],
    ["Bihar", "BR"],
    ["Chhattisgarh", "CG"],
    ["Goa", "GA"],
    ["Gujarat", "GJ"],
    ["Haryana", "HR"],
    ["Himachal Pradesh", "HP"],
    ["Jammu and Kashmir", "JK"],
    ["Jharkhand", "JH"],
    ["Karnataka", "KA"],
    ["Kerala", "KL"],
    ["Madhya Pradesh", "MP"],
    ["Maharashtra", "MH"],
    ["Manipur", "MN"],
    ["Meghalaya", "ML"],
    ["Mizoram", "MZ"],
    ["Nagaland", "NL"],
    ["Odisha", "OD"],
    ["Punjab", "PB"],
    ["Rajasthan", "RJ"],
    ["Sikkim", "SK"],
    ["Tamil Nadu", "TN"],
    ["Telangana", "TS"],
    ["Tripura", "TR"],
    ["Uttarakhand", "UK"],
    ["Uttar Pradesh", "UP"],
    ["West Bengal", "WB"],
    ["Andaman and Nicobar Islands", "AN"],
    ["Chandigarh", "CH"],
    ["Dadra and Nagar Haveli", "DN"],
    ["Daman and Diu", "DD"],
    ["Delhi", "DL"],
    ["Lakshadweep", "LD"],
    ["Puducherry", "PY"],
]

COLORS = ["Black", "White", "Silver", "Grey", "Blue", "Red", "Green", "Yellow", "Brown", "Other"]


def _field(label, field_name, field_type="select", required=False, multiple=False, options=None, metadata=None):
    field = {
        "label": label,
        "fieldName": field_name,
        "type": field_type,
        "required": required,
        "multiple": multiple,
    }
    if options is not None:
        field["options"] = options
    if metadata is not None:
        field["metadata"] = metadata
    return field


_CATEGORY_FIELDS: Dict[str, List[Dict[str, Any]]] = {
    "Books": [
        _field(
            "genre",
            "Genre",
            required=True,
            options=["Fiction", "Non-Fiction", "Academic", "Comics", "Biography", "Children"],
            metadata=[
                {
                    "category": "Academic",
                    "fields": [
                        _field("subCategory", "Subject", options=["Engineering", "Medical", "Law", "Commerce", "Arts"]),
                    ],
                },
                {
                    "category": "Fiction",
                    "fields": [
                        _field("type", "Type", options=["Novel", "Short Stories", "Poetry", "Drama"]),
                    ],
                },
            ],
        ),
        _field("author", "Author", field_type="text"),
        _field("language", "Language", options=["English", "Hindi", "Tamil", "Telugu", "Bengali", "Other"]),
    ],
    "Electronics": [
        _field(
            "subCategory",
            "Sub Category",
            required=True,
            options=["Mobiles", "Laptops", "Televisions", "Cameras", "Audio"],
            metadata=[
                {
                    "category": "Mobiles",
                    "fields": [
                        _field("brand", "Brand", options=["Apple", "Samsung", "OnePlus", "Xiaomi", "Google", "Other"]),
                        _field("color", "Color", options=COLORS),
                        _field("storageCapacity", "Storage Capacity", options=["32GB", "64GB", "128GB", "256GB", "512GB"]),
                        _field("cellularTech", "Cellular Technology", options=["4G", "5G"]),
                    ],
                },
                {
                    "category": "Laptops",
                    "fields": [
                        _field("brand", "Brand", options=["Apple", "Dell", "HP", "Lenovo", "Asus", "Other"]),
                        _field("color", "Color", options=COLORS),
                        _field("storageCapacity", "Storage Capacity", options=["256GB", "512GB", "1TB", "2TB"]),
                    ],
                },
                {
                    "category": "Televisions",
                    "fields": [
                        _field("type", "Display Type", options=["LED", "OLED", "QLED", "LCD"]),
                    ],
                },
                {
                    "category": "Cameras",
                    "fields": [
                        _field("type", "Camera Type", options=["DSLR", "Mirrorless", "Point and Shoot", "Action"]),
                    ],
                },
            ],
        ),
        _field("warranty", "Warranty (months)", field_type="number"),
    ],
    "Clothing": [
        _field(
            "subCategory",
            "Sub Category",
            required=True,
            options=["Men", "Women", "Kids"],
            metadata=[
                {
                    "category": "Men",
                    "fields": [
                        _field("type", "Type", options=["Shirts", "T-Shirts", "Trousers", "Jeans", "Jackets"]),
                        _field("color", "Color", options=COLORS),
                    ],
                },
                {
                    "category": "Women",
                    "fields": [
                        _field("type", "Type", options=["Sarees", "Kurtas", "Dresses", "Tops", "Jeans"]),
                        _field("color", "Color", options=COLORS),
                    ],
                },
                {
                    "category": "Kids",
                    "fields": [
                        _field("type", "Type", options=["Boys", "Girls", "Infants"]),
                    ],
                },
            ],
        ),
        _field("size", "Size", options=["XS", "S", "M", "L", "XL", "XXL"]),
    ],
    "Vehicles": [
        _field(
            "subCategory",
            "Sub Category",
            required=True,
            options=["Cars", "Motorcycles", "Scooters", "Bicycles"],
            metadata=[
                {
                    "category": "Cars",
                    "fields": [
                        _field("brand", "Brand", options=["Maruti Suzuki", "Hyundai", "Tata", "Mahindra", "Honda", "Other"]),
                        _field("type", "Fuel Type", options=["Petrol", "Diesel", "CNG", "Electric"]),
                        _field("color", "Color", options=COLORS),
                    ],
                },
                {
                    "category": "Motorcycles",
                    "fields": [
                        _field("brand", "Brand", options=["Hero", "Bajaj", "TVS", "Royal Enfield", "Yamaha", "Other"]),
                        _field("type", "Fuel Type", options=["Petrol", "Electric"]),
                    ],
                },
            ],
        ),
        _field("year", "Year of Manufacture", field_type="number", required=True),
        _field("kmDriven", "Kilometres Driven", field_type="number"),
    ],
    "Accessories": [
        _field(
            "subCategory",
            "Sub Category",
            required=True,
            options=["Watches", "Bags", "Jewellery", "Eyewear", "Footwear"],
            metadata=[
                {
                    "category": "Watches",
                    "fields": [
                        _field("type", "Type", options=["Analog", "Digital", "Smart"]),
                        _field("color", "Color", options=COLORS),
                    ],
                },
                {
                    "category": "Bags",
                    "fields": [
                        _field("type", "Type", options=["Backpacks", "Handbags", "Luggage", "Wallets"]),
                    ],
                },
            ],
        ),
    ],
}


def get_product_category_fields(category: str) -> List[Dict[str, Any]]:
    """Return a copy of the form fields of ``category`` (empty for unknown categories)."""
    return copy.deepcopy(_CATEGORY_FIELDS.get(category, []))


PRODUCT_CATEGORIES_METADATA = [
    {"category": category, "fields": get_product_category_fields(category)} for category in PRODUCT_CATEGORIES
]


def build_category_facets() -> List[Dict[str, Any]]:
    """
    Summarize every category into its facet options.

    For each category the first field labelled genre, subCategory or brand
    supplies ``options``; the nested metadata fields of that field with a
    sub-facet label supply ``subOptions`` as ``{category, field, options}``.
    """
    facets = []
    for entry in PRODUCT_CATEGORIES_METADATA:
        fields = copy.deepcopy(entry["fields"])
        facet_field = next((f for f in fields if f["label"] in FACET_LABELS), None)

        options, sub_options = [], []
        if facet_field:
            options = facet_field.get("options", [])
            for meta in facet_field.get("metadata") or []:
                for meta_field in meta["fields"]:
                    if meta_field["label"] in SUB_FACET_LABELS:
                        sub_options.append(
                            {
                                "category": meta["category"],
                                "field": meta_field["fieldName"],
                                "options": meta_field.get("options", []),
                            }
                        )

        facets.append({"category": entry["category"], "options": options, "subOptions": sub_options})
    return facets


def build_create_product_fields() -> List[Dict[str, Any]]:
    """Field descriptors of the create-product form."""
    return [
        _field("name", "Product Name", field_type="text", required=True),
        _field(
            "category",
            "Category",
            required=True,
            options=list(PRODUCT_CATEGORIES),
            metadata=copy.deepcopy(PRODUCT_CATEGORIES_METADATA),
        ),
        _field("price", "Price", field_type="number", required=True),
        _field("description", "Description", field_type="textarea", required=True),
        _field("state", "State", field_type="autocomplete", required=True, options=copy.deepcopy(STATES_INFO)),
        _field("pincode", "PIN", field_type="number", required=True),
        _field("latitude", "Latitude", field_type="number", required=True),
        _field("longitude", "Longitude", field_type="number", required=True),
        _field("note", "Note", field_type="textarea"),
        _field("images", "Images", field_type="file", required=True, multiple=True),
        _field("hashtags", "Hash Tags", field_type="hashtag"),
    ]


def is_known_state(value: str) -> bool:
    """True if ``value`` is a state name or state code (case-insensitive)."""
    needle = (value or "").strip().lower()
    return any(needle in (name.lower(), code.lower()) for name, code in STATES_INFO)
