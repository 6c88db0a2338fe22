"""Built-in listings loaded into a fresh catalog."""

from __future__ import annotations

from datetime import UTC, datetime

from src.models.review import Review
from src.models.service import ProviderRef, Service


def _review(
    review_id: int, user_id: int, name: str, rating: int, comment: str, day: int
) -> Review:
    return Review(
        id=review_id,
        user_id=user_id,
        name=name,
        rating=rating,
        comment=comment,
        created_at=datetime(2025, 1, day, 12, 0, tzinfo=UTC),
    )


def build_seed_catalog() -> list[Service]:
    """Return fresh copies of the demo listings.

    Aggregates are consistent with the attached reviews: ``rating`` is the
    two-decimal mean of ``reviews_list`` and ``reviews`` its length.
    """

    return [
        Service(
            id=1,
            title="Professional Web Development",
            description="Custom websites and web applications built with modern technologies",
            category="tech",
            price=2500,
            rating=4.67,
            reviews=3,
            location="New York, NY",
            image="/web-dev-workspace.png",
            provider=ProviderRef(id=2, name="Jane Provider"),
            provider_id=2,
            delivery_time="2-4 weeks",
            features=[
                "Responsive design for all devices",
                "SEO optimization included",
                "3 rounds of revisions",
                "Post-launch support for 30 days",
            ],
            views=342,
            reviews_list=[
                _review(1, 101, "John Smith", 5, "Excellent work! Very professional and delivered on time.", 20),
                _review(2, 102, "Sarah Johnson", 5, "Great communication throughout the project. Highly recommend!", 12),
                _review(3, 103, "Liam Turner", 4, "Solid build, a couple of small delays.", 3),
            ],
        ),
        Service(
            id=2,
            title="Home Cleaning Service",
            description="Deep cleaning for homes and apartments",
            category="home",
            price=150,
            rating=4.5,
            reviews=2,
            location="Los Angeles, CA",
            image="/clean-modern-home-interior-with-cleaning-supplies.jpg",
            provider=ProviderRef(id=3, name="Clean Pro"),
            provider_id=3,
            delivery_time="Same day",
            features=[
                "Eco-friendly products",
                "Insured and bonded",
                "Flexible scheduling",
                "Satisfaction guaranteed",
            ],
            views=256,
            reviews_list=[
                _review(4, 104, "Mike Davis", 5, "My house has never looked better!", 18),
                _review(5, 101, "John Smith", 4, "Thorough and on time.", 9),
            ],
        ),
        Service(
            id=3,
            title="Logo & Brand Identity Design",
            description="Professional logo design and complete brand identity packages",
            category="design",
            price=800,
            rating=5.0,
            reviews=1,
            location="Chicago, IL",
            image="/creative-design-workspace-with-logo-sketches-and-c.jpg",
            provider=ProviderRef(id=4, name="Creative Studio"),
            provider_id=4,
            delivery_time="1-2 weeks",
            features=[
                "Multiple design concepts",
                "Unlimited revisions",
                "All file formats included",
                "Brand style guide",
                "Social media kit",
            ],
            views=412,
            reviews_list=[
                _review(6, 105, "Emily Chen", 5, "Amazing designer! Captured our vision perfectly.", 25),
            ],
        ),
        Service(
            id=4,
            title="Business Consulting",
            description="Strategic business consulting for startups and small businesses",
            category="business",
            price=500,
            location="Boston, MA",
            image="/professional-business-meeting-with-charts-and-stra.jpg",
            provider=ProviderRef(id=5, name="Business Advisors"),
            provider_id=5,
            delivery_time="Flexible",
            features=["Market analysis", "Growth strategy", "Financial planning", "Ongoing support"],
            views=189,
        ),
        Service(
            id=5,
            title="Math & Science Tutoring",
            description="One-on-one tutoring for high school and college students",
            category="education",
            price=75,
            location="Austin, TX",
            image="/student-learning-with-books-and-educational-materi.jpg",
            provider=ProviderRef(id=6, name="Tutor Pro"),
            provider_id=6,
            delivery_time="Flexible",
            features=["Personalized lesson plans", "Homework help", "Test preparation", "Progress tracking"],
            views=567,
        ),
        Service(
            id=6,
            title="Mobile App Development",
            description="iOS and Android app development services",
            category="tech",
            price=5000,
            location="San Francisco, CA",
            image="/mobile-app-development-with-smartphone-and-code-in.jpg",
            provider=ProviderRef(id=7, name="App Developers Inc"),
            provider_id=7,
            delivery_time="6-8 weeks",
            features=["Native or cross-platform", "UI/UX design included", "App store submission", "6 months support"],
            views=298,
        ),
    ]
