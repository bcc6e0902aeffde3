"""Fixed records for the public demo tenant."""

from datetime import date

from talent_directory.core.config import settings
from talent_directory.schemas.subscriber import SubscriberResponse
from talent_directory.schemas.talent_pool import TalentPoolResponse
from talent_directory.schemas.tenant import TenantResponse

DEMO_TENANT_ID = "demo-company"


def demo_tenant() -> TenantResponse:
    """The demo tenant profile. It is never persisted."""
    return TenantResponse(
        id=DEMO_TENANT_ID,
        email=settings.demo_email,
        company_name="Tech Innovations Inc.",
        logo_url="",
        brand_color="#3B82F6",
        careers_page_url="https://techinnovations.com/careers",
        departments=["Engineering", "Product", "Marketing", "Sales"],
        intro_text="Join our team and help build the future of technology!",
    )


def demo_subscribers() -> list:
    return [
        SubscriberResponse(
            id="1",
            email="sarah@example.com",
            departments=["Engineering", "Product"],
            linkedin_url="https://linkedin.com/in/sarah-dev",
            tenant_id=DEMO_TENANT_ID,
            signup_date=date(2024, 1, 15),
            motivation="Passionate about building scalable systems and leading technical teams.",
            current_location="San Francisco, CA",
            preferred_location="San Francisco, CA",
            job_title="Senior Engineering Manager",
            talent_pool_ids=["1"],
        ),
        SubscriberResponse(
            id="2",
            email="mike@example.com",
            departments=["Marketing", "Sales"],
            tenant_id=DEMO_TENANT_ID,
            signup_date=date(2024, 1, 14),
            current_location="New York, NY",
            preferred_location="Remote",
            job_title="Marketing Specialist",
        ),
        SubscriberResponse(
            id="3",
            email="jane@example.com",
            departments=["Engineering"],
            linkedin_url="https://linkedin.com/in/jane-engineer",
            tenant_id=DEMO_TENANT_ID,
            signup_date=date(2024, 1, 13),
            motivation="Looking to work on innovative ML projects that solve real-world problems.",
            current_location="Austin, TX",
            preferred_location="Austin, TX",
            job_title="Machine Learning Engineer",
            talent_pool_ids=["1", "2"],
        ),
        SubscriberResponse(
            id="4",
            email="alex@example.com",
            departments=["Product"],
            linkedin_url="https://linkedin.com/in/alex-pm",
            tenant_id=DEMO_TENANT_ID,
            signup_date=date(2024, 1, 12),
            motivation="Product leader focused on user experience and data-driven decisions.",
            current_location="Seattle, WA",
            preferred_location="Seattle, WA",
            job_title="Senior Product Manager",
            talent_pool_ids=["3"],
        ),
        SubscriberResponse(
            id="5",
            email="emily@example.com",
            departments=["Engineering"],
            tenant_id=DEMO_TENANT_ID,
            signup_date=date(2024, 1, 11),
            current_location="Boston, MA",
            preferred_location="Remote",
            job_title="Frontend Developer",
        ),
    ]


def demo_talent_pools() -> list:
    return [
        TalentPoolResponse(
            id="1",
            title="Senior Engineers",
            departments=["Engineering"],
            tenant_id=DEMO_TENANT_ID,
            created_date=date(2024, 1, 10),
            description="High-potential senior engineering candidates",
        ),
        TalentPoolResponse(
            id="2",
            title="ML/AI Specialists",
            departments=["Engineering", "Product"],
            tenant_id=DEMO_TENANT_ID,
            created_date=date(2024, 1, 12),
            description="Candidates with machine learning and AI expertise",
        ),
        TalentPoolResponse(
            id="3",
            title="Product Leaders",
            departments=["Product"],
            tenant_id=DEMO_TENANT_ID,
            created_date=date(2024, 1, 8),
            description="Experienced product managers and leaders",
        ),
    ]
