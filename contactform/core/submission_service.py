"""
Submission pipeline: validate the form, write it to the store, shape the reply.
"""

import logging

from contactform.core.errors import (
    FormValidationError,
    InternalInvariantError,
    StorageError,
)
from contactform.core.validation import validate_form_data
from contactform.db.store import SubmissionStore
from contactform.models.contact import FormData, SubmissionResponse

logger = logging.getLogger(__name__)

SUBMISSIONS_COLLECTION = "submissions"


class SubmissionService:
    def __init__(self, store: SubmissionStore):
        self.store = store

    async def submit(self, data: FormData) -> SubmissionResponse:
        """
        Validate and persist one contact form submission.

        The response echoes the submitted values exactly as received; only the
        id comes from the store.

        Raises:
            FormValidationError: the form breaks a field rule (nothing is written)
            StorageError: the store failed to create the record
            InternalInvariantError: the store returned no record or no id
        """
        try:
            validate_form_data(data)
        except FormValidationError as e:
            logger.info(f"Rejected submission: {e.kind.value}")
            raise

        try:
            created = await self.store.create(SUBMISSIONS_COLLECTION, data.model_dump())
        except StorageError as e:
            logger.error(f"❌ Failed to store submission: {e.detail}")
            raise
        except Exception as e:
            logger.error(f"❌ Failed to store submission: {str(e)}")
            raise StorageError(str(e)) from e

        if not created:
            logger.error("❌ Store reported success but returned no records")
            raise InternalInvariantError("create returned no records")

        record = created[0]
        record_id = record.get("id") if isinstance(record, dict) else None
        if not record_id:
            logger.error("❌ Store returned a record without an id")
            raise InternalInvariantError("created record has no id")

        logger.info(f"✅ Stored submission {record_id}")
        return SubmissionResponse(
            id=str(record_id),
            name=data.name,
            email=data.email,
            message=data.message,
        )
