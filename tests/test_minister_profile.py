"""Tests for minister profile sections through the API and the service."""

import unittest

from fastapi.testclient import TestClient
from pydantic.alias_generators import to_camel

from ministry_hub.core.database import SessionLocal
from ministry_hub.main import app
from ministry_hub.models import MinisterChild, MinisterMinistrySkill
from ministry_hub.schemas.people import MINISTER_PROFILE_SECTIONS, MinisterCreate
from ministry_hub.services import entities
from ministry_hub.services.ministers import PROFILE_SECTION_MODELS
from tests.support import add_church, reset_database


def _minister(church_id: int, rank_id: int, skill_id: int, **overrides) -> dict:
    body = {
        "churchId": church_id,
        "firstName": "Jose",
        "lastName": "Reyes",
        "dateOfBirth": "1975-02-14",
        "placeOfBirth": "Cebu City",
        "address": "789 Colon Street, Cebu City",
        "gender": "Male",
        "civilStatus": "married",
        "children": [
            {"name": "Maria Reyes", "placeOfBirth": "Cebu City", "dateOfBirth": "2005-06-01", "gender": "female"},
        ],
        "emergencyContacts": [
            {"name": "Ana Reyes", "relationship": "Spouse", "address": "Cebu City", "contactNumber": "+639171234567"},
        ],
        "educationBackgrounds": [
            {"schoolName": "Cebu Bible College", "educationalAttainment": "College", "course": "Theology"},
        ],
        "ministryExperiences": [{"ministryRankId": rank_id, "fromYear": "2001", "toYear": "2010"}],
        "ministrySkills": [{"ministrySkillId": skill_id}],
        "ministryRecords": [{"churchLocationId": church_id, "fromYear": "2010", "contribution": "Youth work"}],
        "awardsRecognitions": [{"year": "2015", "description": "Outstanding Pastor"}],
        "employmentRecords": [{"companyName": "Acme", "fromYear": "1995", "toYear": "2000", "position": "Clerk"}],
        "seminarsConferences": [{"title": "Leadership Summit", "year": "2019", "numberOfHours": 16}],
        "caseReports": [{"description": "None on file", "year": "2020"}],
    }
    body.update(overrides)
    return body


class MinisterProfileTestCase(unittest.TestCase):
    def setUp(self) -> None:
        reset_database()
        self.client = TestClient(app)
        db = SessionLocal()
        try:
            self.church_id = add_church(db, "IRM Branch - Cebu").id
        finally:
            db.close()
        self.rank_id = self.client.post("/api/ministry-ranks", json={"name": "Pastor"}).json()["id"]
        self.skill_id = self.client.post(
            "/api/ministry-skills", json={"name": "Preaching", "description": "Pulpit ministry"}
        ).json()["id"]

    def _create(self, **overrides) -> dict:
        r = self.client.post("/api/ministers", json=_minister(self.church_id, self.rank_id, self.skill_id, **overrides))
        self.assertEqual(r.status_code, 201, r.text)
        return r.json()


class TestMinisterProfileApi(MinisterProfileTestCase):
    def test_create_then_get_returns_every_section(self) -> None:
        created = self._create()
        r = self.client.get(f"/api/ministers/{created['id']}")
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(body["gender"], "male")
        self.assertEqual([c["name"] for c in body["children"]], ["Maria Reyes"])
        self.assertEqual(body["children"][0]["dateOfBirth"], "2005-06-01")
        self.assertEqual(body["emergencyContacts"][0]["relationship"], "Spouse")
        self.assertEqual(body["educationBackgrounds"][0]["course"], "Theology")
        self.assertIsNone(body["educationBackgrounds"][0]["dateGraduated"])
        self.assertEqual(body["ministryExperiences"][0]["ministryRankId"], self.rank_id)
        self.assertEqual(body["ministrySkills"][0]["ministrySkillId"], self.skill_id)
        self.assertEqual(body["ministryRecords"][0]["churchLocationId"], self.church_id)
        self.assertIsNone(body["ministryRecords"][0]["toYear"])
        self.assertEqual(body["awardsRecognitions"][0]["description"], "Outstanding Pastor")
        self.assertEqual(body["employmentRecords"][0]["position"], "Clerk")
        self.assertEqual(body["seminarsConferences"][0]["numberOfHours"], 16)
        self.assertEqual(body["caseReports"][0]["year"], "2020")
        self.assertTrue(all(isinstance(c["id"], int) for c in body["children"]))

    def test_list_stays_flat(self) -> None:
        self._create()
        r = self.client.get("/api/ministers")
        self.assertEqual(r.status_code, 200)
        self.assertNotIn("children", r.json()[0])

    def test_put_replaces_sections(self) -> None:
        minister_id = self._create()["id"]
        body = _minister(self.church_id, self.rank_id, self.skill_id)
        body["children"] = [
            {"name": "Pedro Reyes", "placeOfBirth": "Manila", "dateOfBirth": "2008-01-09", "gender": "male"},
            {"name": "Rosa Reyes", "placeOfBirth": "Manila", "dateOfBirth": "2010-03-20", "gender": "female"},
        ]
        del body["caseReports"]
        r = self.client.put(f"/api/ministers/{minister_id}", json=body)
        self.assertEqual(r.status_code, 200)
        self.assertEqual([c["name"] for c in r.json()["children"]], ["Pedro Reyes", "Rosa Reyes"])
        self.assertEqual(r.json()["caseReports"], [])

        db = SessionLocal()
        try:
            names = [c.name for c in db.query(MinisterChild).filter_by(minister_id=minister_id)]
        finally:
            db.close()
        self.assertEqual(sorted(names), ["Pedro Reyes", "Rosa Reyes"])

    def test_patch_replaces_only_the_sections_sent(self) -> None:
        minister_id = self._create()["id"]
        r = self.client.patch(
            f"/api/ministers/{minister_id}",
            json={"awardsRecognitions": [{"year": "2021", "description": "Service Award"}]},
        )
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual([a["year"] for a in body["awardsRecognitions"]], ["2021"])
        self.assertEqual(len(body["children"]), 1)
        self.assertEqual(len(body["ministrySkills"]), 1)

    def test_null_section_is_rejected(self) -> None:
        minister_id = self._create()["id"]
        r = self.client.patch(f"/api/ministers/{minister_id}", json={"children": None})
        self.assertEqual(r.status_code, 400)

    def test_invalid_section_entry_is_400(self) -> None:
        body = _minister(self.church_id, self.rank_id, self.skill_id)
        body["children"] = [{"name": "", "placeOfBirth": "Cebu", "dateOfBirth": "2005-06-01", "gender": "female"}]
        r = self.client.post("/api/ministers", json=body)
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "Validation failed")

    def test_unknown_skill_is_409_and_nothing_is_stored(self) -> None:
        r = self.client.post(
            "/api/ministers",
            json=_minister(self.church_id, self.rank_id, self.skill_id, ministrySkills=[{"ministrySkillId": 9999}]),
        )
        self.assertEqual(r.status_code, 409)
        self.assertEqual(r.json(), {"error": "Minister conflicts with existing records"})
        self.assertEqual(self.client.get("/api/ministers").json(), [])

    def test_delete_removes_section_rows(self) -> None:
        minister_id = self._create()["id"]
        r = self.client.delete(f"/api/ministers/{minister_id}")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"message": "Minister deleted"})
        db = SessionLocal()
        try:
            for model in PROFILE_SECTION_MODELS.values():
                with self.subTest(table=model.__tablename__):
                    self.assertEqual(db.query(model).count(), 0)
        finally:
            db.close()

    def test_skill_in_use_cannot_be_deleted(self) -> None:
        self._create()
        r = self.client.delete(f"/api/ministry-skills/{self.skill_id}")
        self.assertEqual(r.status_code, 409)


class TestMinisterService(MinisterProfileTestCase):
    def test_section_names_match_schema(self) -> None:
        self.assertEqual(set(PROFILE_SECTION_MODELS), set(MINISTER_PROFILE_SECTIONS))

    def test_create_without_sections(self) -> None:
        body = _minister(self.church_id, self.rank_id, self.skill_id)
        for section in MINISTER_PROFILE_SECTIONS:
            body.pop(to_camel(section))
        data = MinisterCreate.model_validate(body)
        db = SessionLocal()
        try:
            row = entities.ministers.create(db, data)
            self.assertEqual(row.children, [])
            self.assertEqual(db.query(MinisterMinistrySkill).count(), 0)
        finally:
            db.close()


if __name__ == "__main__":
    unittest.main()
