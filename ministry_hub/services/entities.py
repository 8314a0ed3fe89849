"""One CrudService per entity table."""

from ministry_hub.models import (
    Church,
    ChurchCoverPhoto,
    ChurchEvent,
    ContactSubmission,
    Member,
    Minister,
    MinistryRank,
    MinistrySkill,
)
from ministry_hub.services.crud import CrudService
from ministry_hub.services.ministers import MinisterService

churches = CrudService(
    Church,
    label="Church",
    order_by="name",
    delete_conflict_message="Church has members or ministers",
)
members = CrudService(Member, label="Member")
ministers = MinisterService(Minister, label="Minister")
ministry_ranks = CrudService(MinistryRank, label="Ministry rank")
ministry_skills = CrudService(MinistrySkill, label="Ministry skill")
church_events = CrudService(ChurchEvent, label="Church event", order_by="datetime")
church_covers = CrudService(ChurchCoverPhoto, label="Church cover photo")
contact_submissions = CrudService(ContactSubmission, label="Contact submission")
