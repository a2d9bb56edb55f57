"""
MongoDB Repository for students and attendance records.
"""
import logging
from typing import List, Optional, Tuple

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, MongoClient
from pymongo.errors import DuplicateKeyError, OperationFailure, PyMongoError

from attendance_api.config.settings import Config, DEFAULT_DATABASE
from attendance_api.exceptions.base import ConflictError
from attendance_api.schemas.models import Attendance, Student
from attendance_api.utils.error_handling import ErrorHandler

logger = logging.getLogger(__name__)

STUDENTS = 'students'
ATTENDANCES = 'attendances'

UNIQUE_INDEXES = {
    STUDENTS: ([('roll', ASCENDING)], 'roll_1'),
    ATTENDANCES: ([('student', ASCENDING), ('date', ASCENDING)], 'student_1_date_1'),
}

DUPLICATE_ROLL_MESSAGE = "Student with this roll already exists"


class MongoRepository:
    """Repository for MongoDB attendance database operations."""

    def __init__(self, uri: str = None, database: str = None, client: MongoClient = None,
                 server_selection_timeout_ms: int = None, max_pool_size: int = None):
        self.uri = uri or Config.MONGO_URI
        self.database = database or Config.MONGO_DATABASE
        self.server_selection_timeout_ms = server_selection_timeout_ms or Config.MONGO_SERVER_SELECTION_TIMEOUT_MS
        self.max_pool_size = max_pool_size or Config.MONGO_MAX_POOL_SIZE
        self.client = client
        self.db = None
        self._settled_indexes = set()
        self._connect()

    def _connect(self):
        """Create the shared client and check the server is reachable.

        An unreachable server is logged but not fatal: every later operation
        goes through the same client and fails with a DatabaseError until the
        server comes back.
        """
        if self.client is None:
            self.client = MongoClient(
                self.uri,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
                maxPoolSize=self.max_pool_size,
                retryWrites=True,
                retryReads=True
            )

        if self.database:
            self.db = self.client[self.database]
        else:
            self.db = self.client.get_default_database(default=DEFAULT_DATABASE)

        try:
            self.client.admin.command('ping')
            logger.info("MongoDB connected successfully")
            self.ensure_indexes()
        except PyMongoError as e:
            logger.error(f"MongoDB connection error: {e}")

    def ensure_indexes(self):
        """Create the unique indexes backing roll and (student, date) uniqueness."""
        for collection in UNIQUE_INDEXES:
            self._ensure_index(collection)

    def _ensure_index(self, collection: str):
        """Build one collection's unique index, once.

        A failure never blocks the caller's write. A server-side rejection,
        such as duplicates already stored, is logged and not retried until
        restart; connection failures are retried before the next write.
        """
        if collection in self._settled_indexes:
            return
        keys, name = UNIQUE_INDEXES[collection]
        try:
            self.db[collection].create_index(keys, unique=True, name=name)
            logger.info(f"MongoDB index {name} ensured on {collection}")
        except OperationFailure as e:
            logger.error(f"MongoDB index {name} could not be built on {collection}: {e}")
        except PyMongoError as e:
            logger.warning(f"MongoDB index {name} deferred on {collection}: {e}")
            return
        self._settled_indexes.add(collection)

    def close(self):
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")

    # Students

    def find_student_by_roll(self, roll: str) -> Optional[Student]:
        try:
            doc = self.db[STUDENTS].find_one({'roll': roll})
        except PyMongoError as e:
            raise ErrorHandler.handle_database_error(e, 'find_student_by_roll', {'roll': roll})
        return Student.from_document(doc) if doc else None

    def get_student(self, student_id: str) -> Optional[Student]:
        try:
            doc = self.db[STUDENTS].find_one({'_id': ObjectId(student_id)})
        except (PyMongoError, InvalidId, TypeError) as e:
            raise ErrorHandler.handle_database_error(e, 'get_student', {'student_id': student_id})
        return Student.from_document(doc) if doc else None

    def create_student(self, name: str, roll: str) -> Student:
        doc = {'name': name, 'roll': roll}
        try:
            self._ensure_index(STUDENTS)
            result = self.db[STUDENTS].insert_one(doc)
        except DuplicateKeyError:
            logger.warning(f"Duplicate roll rejected by index: {roll}")
            raise ConflictError(DUPLICATE_ROLL_MESSAGE, details={'roll': roll})
        except PyMongoError as e:
            raise ErrorHandler.handle_database_error(e, 'create_student', {'roll': roll})

        doc['_id'] = result.inserted_id
        logger.info(f"Student created with roll {roll}, ID: {result.inserted_id}")
        return Student.from_document(doc)

    def list_students(self) -> List[Student]:
        try:
            docs = list(self.db[STUDENTS].find().sort('roll', ASCENDING))
        except PyMongoError as e:
            raise ErrorHandler.handle_database_error(e, 'list_students')
        return [Student.from_document(doc) for doc in docs]

    # Attendance

    def upsert_attendance(self, student_id: str, date: str, status: str) -> Tuple[Attendance, bool]:
        """Set the status for (student, date), creating the record if needed.

        Returns:
            The stored record and whether it was created by this call.
        """
        context = {'student_id': student_id, 'date': date}
        try:
            self._ensure_index(ATTENDANCES)
            query = {'student': ObjectId(student_id), 'date': date}
            update = {'$set': {'status': status}}
            try:
                result = self.db[ATTENDANCES].update_one(query, update, upsert=True)
            except DuplicateKeyError:
                # A concurrent request inserted this (student, date) first
                logger.info(f"Concurrent attendance insert for {context}, retrying as update")
                result = self.db[ATTENDANCES].update_one(query, update)

            doc = self.db[ATTENDANCES].find_one(query)
        except (PyMongoError, InvalidId, TypeError) as e:
            raise ErrorHandler.handle_database_error(e, 'upsert_attendance', context)

        if doc is None:
            raise ErrorHandler.handle_database_error(
                LookupError("attendance record missing after upsert"), 'upsert_attendance', context
            )
        return Attendance.from_document(doc), result.upserted_id is not None

    def list_attendance(self, date: str = None) -> List[Attendance]:
        """All records, optionally for one date, with the student populated."""
        pipeline = []
        if date:
            pipeline.append({'$match': {'date': date}})
        pipeline.extend([
            {'$sort': {'date': ASCENDING, '_id': ASCENDING}},
            {'$lookup': {
                'from': STUDENTS,
                'localField': 'student',
                'foreignField': '_id',
                'as': 'student'
            }},
            {'$unwind': {'path': '$student', 'preserveNullAndEmptyArrays': True}},
        ])

        try:
            docs = list(self.db[ATTENDANCES].aggregate(pipeline))
        except PyMongoError as e:
            raise ErrorHandler.handle_database_error(e, 'list_attendance', {'date': date})
        return [Attendance.from_document(doc) for doc in docs]

    def list_attendance_for_student(self, student_id: str) -> List[Attendance]:
        try:
            cursor = self.db[ATTENDANCES].find({'student': ObjectId(student_id)})
            docs = list(cursor.sort([('date', ASCENDING), ('_id', ASCENDING)]))
        except (PyMongoError, InvalidId, TypeError) as e:
            raise ErrorHandler.handle_database_error(e, 'list_attendance_for_student', {'student_id': student_id})
        return [Attendance.from_document(doc) for doc in docs]
