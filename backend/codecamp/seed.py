"""Sample data for local development and tests."""

from datetime import date

from sqlmodel import Session, select

from . import models


def seed_sample_data(session: Session) -> bool:
    """Insert the sample camp, speakers and talks into an empty database.

    Returns True when data was inserted, False when camps already exist.
    """
    if session.exec(select(models.Camp.id)).first() is not None:
        return False
    shawn = models.Speaker(
        first_name="Shawn", last_name="Wildermuth", company="Wilder Minds LLC",
        company_url="http://wilderminds.com", blog_url="http://wildermuth.com",
        twitter="shawnwildermuth", git_hub="shawnwildermuth",
    )
    resa = models.Speaker(
        first_name="Resa", last_name="Wildermuth", company="Wilder Minds LLC",
        company_url="http://wilderminds.com", blog_url="http://shawnandresa.com",
        twitter="resawildermuth", git_hub="resawildermuth",
    )
    camp = models.Camp(
        name="Atlanta Code Camp",
        moniker="ATL2018",
        event_date=date(2018, 10, 18),
        length=1,
        location=models.Location(
            venue_name="Atlanta Convention Center", address1="123 Main Street",
            city_town="Atlanta", state_province="GA", postal_code="12345", country="USA",
        ),
    )
    camp.talks = [
        models.Talk(
            title="Entity Framework From Scratch",
            abstract="Entity Framework from scratch in an hour. Probably cover it all",
            level=100, speaker=shawn,
        ),
        models.Talk(
            title="Writing Sample Data Made Easy",
            abstract="Thinking of good sample data examples is tiring.",
            level=200, speaker=resa,
        ),
    ]
    session.add_all([shawn, resa, camp])
    session.commit()
    return True
