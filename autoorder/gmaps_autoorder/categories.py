"""
GMaps business categories, most popular first.

Tiers are informational; the planner only sees the flat CATEGORIES tuple, and
its order decides which queries land in which batch part.
"""

from typing import Tuple

TIER_1_UNIVERSAL: Tuple[str, ...] = (
    "Accountant", "Attorney", "Auto repair shop", "Bank", "Church",
    "Construction company", "Dental clinic", "Doctor", "Funeral home",
    "General contractor", "Gym", "Hardware store", "HVAC contractor",
    "Insurance agency", "Law firm", "Pharmacy", "Place of worship",
    "Real estate agency", "School", "Tax preparation service", "Veterinarian",
)

TIER_2_COMMON: Tuple[str, ...] = (
    "Appliance store", "Architect", "Assisted living facility", "Auto dealer",
    "Auto parts store", "Bowling alley", "Car rental agency", "Child care agency",
    "Chiropractor", "Community center", "Credit union", "Day care center",
    "Driving school", "Electronics store", "Employment agency", "Eye care center",
    "Financial planner", "Fitness center", "Furniture store", "Golf course",
    "Home goods store", "Hospital", "Hotel", "Martial arts school", "Mattress store",
    "Medical clinic", "Movie theater", "Music school", "Nursing home", "Optometrist",
    "Personal trainer", "Physical therapy clinic", "Preschool", "Printing service",
    "Property management company", "Recreation center", "Senior center",
    "Tire shop", "Title company", "Travel agency", "Tutoring service",
    "Urgent care center", "Wedding venue", "Wellness center", "Yoga studio",
)

TIER_3_REGIONAL: Tuple[str, ...] = (
    "Addiction treatment center", "After school program", "Allergist",
    "Art gallery", "Art school", "Audiologist", "Banquet hall",
    "Building materials store", "Business management consultant", "Cardiologist",
    "Co-working space", "College", "Commercial printer", "Computer consultant",
    "Computer support and services", "Consultant", "Country club", "Dance school",
    "Department store", "Dermatologist", "Engineer", "Equipment rental agency",
    "Event venue", "Gastroenterologist", "Gymnastics center", "Hospice",
    "Indoor playground", "Investment company", "Laboratory", "Language school",
    "Loan agency", "Machine shop", "Mental health clinic", "Mortgage lender",
    "Motorcycle dealer", "Neurologist", "Non-profit organization", "Notary public",
    "Nursing agency", "Nutritionist", "Office furniture store", "Ophthalmologist",
    "Orthopedic clinic", "Osteopath", "Pediatrician", "Plumbing supply store",
    "Podiatrist", "Private investigator", "Rehabilitation center", "RV dealer",
    "Sports club", "Surgeon", "Swimming pool", "Technical school",
    "Truck dealer", "Truck repair shop", "University", "Urologist",
    "Vocational school", "Warehouse",
)

TIER_4_METRO: Tuple[str, ...] = (
    "Aerospace company", "Association or organization", "Automation company",
    "Biotechnology company", "Blood bank", "Bottling company", "Business school",
    "Call center", "Car inspection station", "Chamber of commerce", "Chemical wholesaler",
    "Computer security service", "Computer training school", "Conference center",
    "Convention center", "Corporate office", "Council", "Credit counseling service",
    "Culinary school", "Data recovery service", "Dental laboratory", "Diagnostic center",
    "Dialysis center", "Distribution service", "Education center",
    "Electric motor repair shop", "Electrical supply store", "Factory",
    "Farm equipment supplier", "Fertility clinic", "Fitness equipment store",
    "Flight school", "Food processing equipment", "Freight forwarding service",
    "Geriatrician", "Industrial chemicals wholesaler", "Industrial design company",
    "Industrial equipment supplier", "Insurance company", "Labor union",
    "Logistics service", "Management school", "Manufacturer", "Medical diagnostic imaging center",
    "Medical laboratory", "Metal fabricator", "Metal supplier", "MRI center",
    "Office space rental agency", "Oncologist", "Otolaryngologist", "Outlet store",
    "Outpatient surgery center", "Packaging supply store", "Pain management physician",
    "Payroll service", "Pharmaceutical company", "Plastic fabrication company",
    "Plastic surgery clinic", "Printing equipment supplier", "Psychiatric hospital",
    "Radiology center", "Reproductive health clinic", "Safety equipment supplier",
    "Scientific equipment supplier", "Shipping company", "Shopping mall", "Showroom",
    "Software company", "Special education school", "Sports complex", "Sports medicine clinic",
    "Steel distributor", "Steel fabricator", "Student housing center", "Surgical center",
    "Telecommunications service provider", "Tennis court", "Textile mill", "Tool store",
    "Training centre", "Veterinary emergency hospital", "Welding supply store",
    "Wholesaler", "Women's health clinic",
)

CATEGORIES: Tuple[str, ...] = TIER_1_UNIVERSAL + TIER_2_COMMON + TIER_3_REGIONAL + TIER_4_METRO
