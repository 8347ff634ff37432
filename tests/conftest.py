"""
Shared fixtures for SideHustle tests.
"""

import copy
import pytest

from sidehustle.utils.constants import SECTION_HEADINGS


def build_idea(title, product_body, difficulty=4, worthiness=7):
    """Build a well-formed idea as the model would return it."""
    sections = [
        {"heading": heading, "body": f"Details about {heading.lower()}."}
        for heading in SECTION_HEADINGS
    ]
    sections[1]["body"] = product_body
    return {
        "title": title,
        "tagline": f"{title} for busy neighbours",
        "sections": sections,
        "difficulty": difficulty,
        "worthiness": worthiness,
        "firstThreeSteps": [
            "List five local prospects.",
            "Draft a one-page offer in Canva.",
            "Message two prospects today.",
        ],
        "insights": {
            "feasibility": "First sale within two weeks if outreach starts now.",
            "numbers": {
                "price": 49.999,
                "cogs": 5.123,
                "marginPct": 89.7561,
                "breakEvenCustomers": 3.6,
                "startupCost": 120,
                "monthlyCost": 25.5,
            },
            "validation": ["Post an offer in a local group.", "Run a pre-sale.", "Interview three customers."],
            "risks": ["Low demand.", "Seasonality.", "Time overrun."],
            "tooling": [
                {"name": "Stripe", "use": "Payments", "estMonthly": 0},
                {"name": "Canva", "use": "Marketing visuals", "estMonthly": 12.991},
            ],
            "kpis": {
                "week1": "10 conversations",
                "month1": "3 paying customers",
                "quarter1": "15 repeat customers",
            },
        },
    }


@pytest.fixture
def sample_profile():
    """Fixture providing a complete request profile."""
    return {
        "age": 30,
        "location": "Austin, Texas",
        "strengths": "Organising and planning",
        "enjoys": "Cooking and hosting",
        "skillset": "Project management, basic web design",
        "hoursPerWeek": 8,
        "seedBudget": 500,
    }


@pytest.fixture
def sample_idea_set():
    """Fixture providing three distinct ideas."""
    return {
        "ideas": [
            build_idea("Meal Prep Coaching", "Weekly meal plans delivered as printable guides."),
            build_idea("Dinner Party Planner", "Full-service planning for small home dinner parties."),
            build_idea("Landing Page Studio", "One-page websites for local food trucks and caterers."),
        ]
    }


@pytest.fixture
def idea_factory():
    """Fixture exposing the idea builder."""
    return build_idea


@pytest.fixture
def raw_idea_set(sample_idea_set):
    """Fixture providing a deep copy of the idea set as a JSON-ready dict."""
    return copy.deepcopy(sample_idea_set)
