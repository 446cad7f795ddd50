"""Static local directory of vetted tradesmen, seeded at import time."""

from typing import Tuple

from tradematch.models import Category, ServiceProvider

LOCAL_DIRECTORY: Tuple[ServiceProvider, ...] = (
    ServiceProvider(
        name="ABC Plumbing Services",
        specialty=Category.PLUMBING,
        rating=4.8,
        location="San Francisco, CA",
        description="Professional plumbing services for residential and commercial properties",
        contact="+1-555-0123",
        website="https://abcplumbing.com",
    ),
    ServiceProvider(
        name="Master Carpentry Co.",
        specialty=Category.CARPENTRY,
        rating=4.9,
        location="San Francisco, CA",
        description="Expert carpentry and woodworking services",
        contact="+1-555-0124",
        website="https://mastercarpentry.com",
    ),
    ServiceProvider(
        name="Golden State Construction",
        specialty=Category.CONSTRUCTION,
        rating=4.7,
        location="San Francisco, CA",
        description="Full-service construction and renovation company",
        contact="+1-555-0125",
        website="https://goldenstateconstruction.com",
    ),
    ServiceProvider(
        name="Quick Fix Electric",
        specialty=Category.ELECTRICAL,
        rating=4.6,
        location="San Francisco, CA",
        description="Licensed electrical contractors for all your electrical needs",
        contact="+1-555-0126",
        website="https://quickfixelectric.com",
    ),
)
