from essayhub.models.reference import (
    AcademicCertification,
    AccountStatus,
    AssignmentType,
    CitationStyle,
    Country,
    Discipline,
    EducationLevel,
    Gender,
    GrammarAnswer,
    GrammarQuestion,
    OrderFormat,
    OrderServiceType,
    OrderStatus,
    TimeAmPm,
)
from essayhub.models.user import User, Writer
from essayhub.schemas.reference_schema import EducationLevelQuerySchema, ServiceTypeQuerySchema
from essayhub.services.constants import ACCOUNT_ACTIVE
from essayhub.utils.lookups import get_required
from essayhub.utils.request_loader import load_request
from essayhub.utils.transaction import resolve_session


def _all(model, session=None):
    session = resolve_session(session)
    return [row.to_dict() for row in session.query(model).order_by(model.id).all()]


def get_all_countries(session=None):
    return _all(Country, session)


def get_all_disciplines(session=None):
    return _all(Discipline, session)


def get_assignment_types(session=None):
    return _all(AssignmentType, session)


def get_all_time(session=None):
    return _all(TimeAmPm, session)


def get_all_genders(session=None):
    return _all(Gender, session)


def get_all_citation_styles(session=None):
    return _all(CitationStyle, session)


def get_all_order_formats(session=None):
    return _all(OrderFormat, session)


def get_all_academic_certifications(session=None):
    return _all(AcademicCertification, session)


def get_order_status_types(session=None):
    return _all(OrderStatus, session)


def get_education_levels(req, session=None):
    """
    Levels describing a person's schooling when `academicInclined` is set,
    otherwise the levels used to group orders (filtered by `orderInclined`).
    """
    session = resolve_session(session)
    data = load_request(EducationLevelQuerySchema(), req)

    q = session.query(EducationLevel)
    if data["academic_inclined"]:
        q = q.filter_by(academic_inclined=True)
    else:
        q = q.filter_by(order_inclined=bool(data["order_inclined"]))

    return [level.to_dict() for level in q.order_by(EducationLevel.id).all()]


def get_specific_order_service_types(req, session=None):
    session = resolve_session(session)
    data = load_request(ServiceTypeQuerySchema(), req)
    types = (
        session.query(OrderServiceType)
        .filter_by(extra=data["extra"])
        .order_by(OrderServiceType.id.asc())
        .all()
    )
    return [t.to_dict() for t in types]


def get_selected_grammar_questions(session=None):
    session = resolve_session(session)
    questions = session.query(GrammarQuestion).order_by(GrammarQuestion.id).all()
    answers = session.query(GrammarAnswer).order_by(GrammarAnswer.id).all()
    return {
        "questions": [q.to_dict() for q in questions],
        "answers": [a.to_dict() for a in answers],
    }


def get_active_writers_emails(session=None):
    session = resolve_session(session)
    active = get_required(session, AccountStatus, "Account status", status=ACCOUNT_ACTIVE)
    rows = (
        session.query(Writer.id, User.email)
        .join(User, User.id == Writer.user_id)
        .filter(User.account_status_id == active.id)
        .order_by(Writer.id)
        .all()
    )
    return [{"id": writer_id, "email": email} for writer_id, email in rows]
