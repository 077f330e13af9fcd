from essayhub.models.reference import (
    AcademicCertification,
    AccountStatus,
    AssignmentType,
    AssignmentTypeCategory,
    CitationStyle,
    Country,
    Currency,
    Discipline,
    EducationLevel,
    EntityType,
    Gender,
    GrammarAnswer,
    GrammarQuestion,
    OrderFileType,
    OrderFormat,
    OrderServiceType,
    OrderStatus,
    PaperDiscount,
    PaymentStatus,
    SubmissionChecklist,
    TimeAmPm,
)
from essayhub.services import constants

# -------------------------------------------------------------------
# Reference rows
# -------------------------------------------------------------------

ORDER_STATUSES = [
    constants.STATUS_AVAILABLE,
    constants.STATUS_BIDDING_ONGOING,
    constants.STATUS_PENDING_PAYMENT,
    constants.STATUS_PENDING_WRITER_ACK,
    constants.STATUS_ONGOING,
    constants.STATUS_SUBMITTED,
    constants.STATUS_UNDERGOING_REVISION,
    constants.STATUS_COMPLETED,
    constants.STATUS_CANCELLED,
]

ORDER_FILE_TYPES = [
    constants.FILE_CLIENT_SUPPORTING,
    constants.FILE_REVISION_SUPPORTING,
    constants.FILE_SUBMITTED_PAPER,
]

CURRENCIES = [
    ("US Dollar", "USD"),
    ("Euro", "EUR"),
    ("British Pound", "GBP"),
]

SERVICE_TYPES = [
    # type, description, price, extra
    ("Writing", "Paper written from scratch", 0.0, False),
    ("Rewriting", "Existing paper rewritten", 0.0, False),
    ("Editing", "Proofreading and editing", 0.0, False),
    ("Plagiarism report", "Originality report sent with the paper", 7.99, True),
    ("Top writer", "Order handled by a top-rated writer", 9.99, True),
]

ORDER_FORMATS = [
    (275, "Double", True),
    (550, "Single", False),
]

TIME_SLOTS = [
    "12:00 AM", "3:00 AM", "6:00 AM", "9:00 AM",
    "12:00 PM", "3:00 PM", "6:00 PM", "9:00 PM",
]

DISCIPLINES = [
    "English", "History", "Business", "Nursing", "Psychology",
    "Computer Science", "Economics", "Law", "Sociology", "Other",
]

EDUCATION_LEVELS = [
    # level, academic_inclined, order_inclined
    ("High School", True, True),
    ("Undergraduate", True, True),
    ("Masters", True, True),
    ("PhD", True, True),
    ("Diploma", True, False),
]

CITATION_STYLES = ["APA", "MLA", "Harvard", "Chicago", "Turabian", "Other"]

ASSIGNMENT_TYPES = {
    "Essays": ["Essay", "Admission Essay", "Argumentative Essay"],
    "Research": ["Research Paper", "Term Paper", "Case Study", "Dissertation"],
    "Other": ["Annotated Bibliography", "Discussion Post", "Lab Report"],
}

GENDERS = ["Male", "Female"]

COUNTRIES = [
    ("Kenya", "KE"),
    ("United States", "US"),
    ("United Kingdom", "GB"),
    ("Canada", "CA"),
    ("Australia", "AU"),
]

PAPER_DISCOUNTS = [
    # lower page limit, discount percent
    (2, 5.0),
    (10, 10.0),
    (20, 15.0),
]

SUBMISSION_CHECKLIST = [
    ("Content", "The paper answers the question and follows the instructions"),
    ("Formatting", "Font, spacing, margins and headings follow the required format"),
    ("Citations", "Sources are cited in the requested citation style"),
    ("Grammar", "Spelling, grammar and punctuation"),
    ("Length", "The paper meets the ordered page count"),
]

ACADEMIC_CERTIFICATIONS = ["Bachelors", "Masters", "PhD"]

GRAMMAR_QUIZ = [
    (
        "Choose the correct word",
        "Neither of the students ___ finished the assignment.",
        "b",
        [("a", "have"), ("b", "has"), ("c", "having")],
    ),
    (
        "Choose the correct word",
        "The committee submitted ___ report yesterday.",
        "a",
        [("a", "its"), ("b", "it's"), ("c", "their's")],
    ),
]


def _seed(session, model, rows):
    """Insert `rows` (dicts) when the table is still empty."""
    if session.query(model.id).first():
        return 0
    for row in rows:
        session.add(model(**row))
    session.flush()
    return len(rows)


def seed_reference_data(session):
    """Insert the lookup rows the workflows resolve by name. Returns rows created."""
    created = 0

    created += _seed(session, OrderStatus, [{"status": s} for s in ORDER_STATUSES])
    created += _seed(session, OrderFileType, [{"type": t} for t in ORDER_FILE_TYPES])
    created += _seed(session, EntityType, [
        {"type": constants.VISIBILITY_PUBLIC},
        {"type": constants.VISIBILITY_PRIVATE},
    ])
    created += _seed(session, PaymentStatus, [
        {"status": s} for s in (constants.PAYMENT_SUCCESS, "Pending", "Failed")
    ])
    created += _seed(session, AccountStatus, [
        {"status": s} for s in (constants.ACCOUNT_ACTIVE, "Suspended", "Deactivated")
    ])
    created += _seed(session, Currency, [
        {"currency": name, "currency_code": code} for name, code in CURRENCIES
    ])

    usd = session.query(Currency).filter_by(currency_code="USD").first()
    created += _seed(session, OrderServiceType, [
        {
            "type": t,
            "description": description,
            "price": price,
            "extra": extra,
            "currency_id": usd.id,
        }
        for t, description, price, extra in SERVICE_TYPES
    ])

    created += _seed(session, OrderFormat, [
        {"words_per_page": words, "spacing": spacing, "currently_in_use": in_use}
        for words, spacing, in_use in ORDER_FORMATS
    ])
    created += _seed(session, TimeAmPm, [{"time": t} for t in TIME_SLOTS])
    created += _seed(session, Discipline, [{"discipline": d} for d in DISCIPLINES])
    created += _seed(session, EducationLevel, [
        {"level": level, "academic_inclined": academic, "order_inclined": order}
        for level, academic, order in EDUCATION_LEVELS
    ])
    created += _seed(session, CitationStyle, [{"citation": c} for c in CITATION_STYLES])

    if not session.query(AssignmentTypeCategory.id).first():
        for category, types in ASSIGNMENT_TYPES.items():
            cat = AssignmentTypeCategory(category=category)
            session.add(cat)
            session.flush()
            for t in types:
                session.add(AssignmentType(type=t, category_id=cat.id))
            created += 1 + len(types)
        session.flush()

    created += _seed(session, Gender, [{"gender": g} for g in GENDERS])
    created += _seed(session, Country, [
        {"country": name, "country_code": code} for name, code in COUNTRIES
    ])
    created += _seed(session, PaperDiscount, [
        {"lower_limit": limit, "discount": discount} for limit, discount in PAPER_DISCOUNTS
    ])
    created += _seed(session, SubmissionChecklist, [
        {"aspect": aspect, "aspect_description": description}
        for aspect, description in SUBMISSION_CHECKLIST
    ])
    created += _seed(session, AcademicCertification, [
        {"achievement": a} for a in ACADEMIC_CERTIFICATIONS
    ])

    if not session.query(GrammarQuestion.id).first():
        for instruction, question, correct_letter, answers in GRAMMAR_QUIZ:
            q = GrammarQuestion(instruction=instruction, question=question)
            session.add(q)
            session.flush()
            for letter, text in answers:
                answer = GrammarAnswer(question_id=q.id, answer=text, answer_letter=letter)
                session.add(answer)
                session.flush()
                if letter == correct_letter:
                    q.correct_answer_id = answer.id
            created += 1 + len(answers)
        session.flush()

    return created
