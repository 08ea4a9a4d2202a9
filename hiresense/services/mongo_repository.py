"""
MongoDB Repository - CRUD operations for the document collections.

Collections:
1. users        - one document per account
2. jobs         - one document per posting
3. applications - one document per (job, applicant) pair

Documents are stored exactly as the API returns them; the Mongo `_id` is
never exposed, records are addressed by their own string `id`.
"""

from typing import List, Optional

from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database

from hiresense.db.mongodb import COLLECTIONS, init_mongo_indexes, test_mongo_connection
from hiresense.services.repository import Repository

# Projection that hides Mongo's ObjectId
NO_ID = {"_id": 0}


class MongoRepository(Repository):

    name = "mongodb"

    def __init__(self, db: Database):
        self.db = db
        self.users = db[COLLECTIONS["users"]]
        self.jobs = db[COLLECTIONS["jobs"]]
        self.applications = db[COLLECTIONS["applications"]]

    def init(self) -> None:
        init_mongo_indexes(self.db)

    def ping(self) -> bool:
        return test_mongo_connection(self.db.client)

    # USERS
    def get_user_by_email(self, email: str) -> Optional[dict]:
        return self.users.find_one({"email": email.lower()}, NO_ID)

    def get_user(self, user_id: str) -> Optional[dict]:
        return self.users.find_one({"id": user_id}, NO_ID)

    def list_users(self) -> List[dict]:
        return list(self.users.find({}, NO_ID))

    def create_user(self, user: dict) -> dict:
        # insert_one adds _id to the dict it is given
        self.users.insert_one(dict(user))
        return user

    def update_user(self, user_id: str, updates: dict) -> Optional[dict]:
        updates = {k: v for k, v in updates.items() if k != "id"}
        if not updates:
            return self.get_user(user_id)
        return self.users.find_one_and_update(
            {"id": user_id},
            {"$set": updates},
            projection=NO_ID,
            return_document=ReturnDocument.AFTER
        )

    # JOBS
    def list_jobs(self) -> List[dict]:
        return list(self.jobs.find({}, NO_ID).sort("postedDate", DESCENDING))

    def get_job(self, job_id: str) -> Optional[dict]:
        return self.jobs.find_one({"id": job_id}, NO_ID)

    def create_job(self, job: dict) -> dict:
        self.jobs.insert_one(dict(job))
        return job

    def count_jobs(self) -> int:
        return self.jobs.count_documents({})

    # APPLICATIONS
    def list_applications(self) -> List[dict]:
        return list(self.applications.find({}, NO_ID))

    def create_application(self, application: dict) -> dict:
        self.applications.insert_one(dict(application))
        return application

    def update_application_status(self, application_id: str, status: str) -> Optional[dict]:
        return self.applications.find_one_and_update(
            {"id": application_id},
            {"$set": {"status": status}},
            projection=NO_ID,
            return_document=ReturnDocument.AFTER
        )
