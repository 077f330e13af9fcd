from essayhub.extensions import db

# Lookup tables. Rows are seeded once and only read by the order workflows.


class Country(db.Model):
    __tablename__ = "countries"

    id = db.Column(db.Integer, primary_key=True)
    country = db.Column(db.String(100), nullable=False, unique=True)
    country_code = db.Column(db.String(10), nullable=False)

    def to_dict(self):
        return {"id": self.id, "country": self.country, "country_code": self.country_code}


class Discipline(db.Model):
    __tablename__ = "disciplines"

    id = db.Column(db.Integer, primary_key=True)
    discipline = db.Column(db.String(255), nullable=False, unique=True)

    def to_dict(self):
        return {"id": self.id, "discipline": self.discipline}


class AssignmentTypeCategory(db.Model):
    __tablename__ = "assignment_type_categories"

    id = db.Column(db.Integer, primary_key=True)
    category = db.Column(db.String(100), nullable=False, unique=True)


class AssignmentType(db.Model):
    __tablename__ = "assignment_types"

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(255), nullable=False, unique=True)
    category_id = db.Column(db.Integer, db.ForeignKey("assignment_type_categories.id"))

    category = db.relationship("AssignmentTypeCategory", lazy=True)

    def to_dict(self):
        return {
            "id": self.id,
            "type": self.type,
            "category": self.category.category if self.category else None,
        }


class EducationLevel(db.Model):
    __tablename__ = "education_levels"

    id = db.Column(db.Integer, primary_key=True)
    level = db.Column(db.String(100), nullable=False, unique=True)
    # levels describing a person's schooling vs. levels used to group orders
    academic_inclined = db.Column(db.Boolean, default=False)
    order_inclined = db.Column(db.Boolean, default=False)

    def to_dict(self):
        return {
            "id": self.id,
            "level": self.level,
            "academic_inclined": self.academic_inclined,
            "order_inclined": self.order_inclined,
        }


class TimeAmPm(db.Model):
    __tablename__ = "time_am_pm"

    id = db.Column(db.Integer, primary_key=True)
    time = db.Column(db.String(20), nullable=False, unique=True)

    def to_dict(self):
        return {"id": self.id, "time": self.time}


class Currency(db.Model):
    __tablename__ = "currencies"

    id = db.Column(db.Integer, primary_key=True)
    currency = db.Column(db.String(100), nullable=False)
    currency_code = db.Column(db.String(10), nullable=False, unique=True)

    def to_dict(self):
        return {"id": self.id, "currency": self.currency, "currency_code": self.currency_code}


class OrderServiceType(db.Model):
    __tablename__ = "order_service_types"

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(100), nullable=False, unique=True)
    description = db.Column(db.Text)
    price = db.Column(db.Float, default=0.0)
    extra = db.Column(db.Boolean, default=False)
    currency_id = db.Column(db.Integer, db.ForeignKey("currencies.id"))

    currency = db.relationship("Currency", lazy=True)

    def to_dict(self):
        return {
            "id": self.id,
            "type": self.type,
            "description": self.description,
            "price": self.price,
            "currency_code": self.currency.currency_code if self.currency else None,
        }


class CitationStyle(db.Model):
    __tablename__ = "citation_styles"

    id = db.Column(db.Integer, primary_key=True)
    citation = db.Column(db.String(50), nullable=False, unique=True)

    def to_dict(self):
        return {"id": self.id, "citation": self.citation}


class OrderFormat(db.Model):
    __tablename__ = "order_formats"

    id = db.Column(db.Integer, primary_key=True)
    words_per_page = db.Column(db.Integer, nullable=False)
    spacing = db.Column(db.String(50), nullable=False)
    currently_in_use = db.Column(db.Boolean, default=False)

    def to_dict(self):
        return {
            "id": self.id,
            "words_per_page": self.words_per_page,
            "spacing": self.spacing,
            "currently_in_use": self.currently_in_use,
        }


class Gender(db.Model):
    __tablename__ = "genders"

    id = db.Column(db.Integer, primary_key=True)
    gender = db.Column(db.String(20), nullable=False, unique=True)

    def to_dict(self):
        return {"id": self.id, "gender": self.gender}


class GrammarQuestion(db.Model):
    __tablename__ = "grammar_questions"

    id = db.Column(db.Integer, primary_key=True)
    instruction = db.Column(db.Text)
    question = db.Column(db.Text, nullable=False)
    correct_answer_id = db.Column(db.Integer)

    def to_dict(self):
        return {
            "id": self.id,
            "instruction": self.instruction,
            "question": self.question,
            "correct_answer_id": self.correct_answer_id,
        }


class GrammarAnswer(db.Model):
    __tablename__ = "grammar_answers"

    id = db.Column(db.Integer, primary_key=True)
    question_id = db.Column(db.Integer, db.ForeignKey("grammar_questions.id"), nullable=False)
    answer = db.Column(db.Text, nullable=False)
    answer_letter = db.Column(db.String(1), nullable=False)

    question = db.relationship("GrammarQuestion", backref=db.backref("answers", lazy=True))

    def to_dict(self):
        return {
            "id": self.id,
            "answer": self.answer,
            "question_id": self.question_id,
            "answer_letter": self.answer_letter,
        }


class AcademicCertification(db.Model):
    __tablename__ = "academic_certifications"

    id = db.Column(db.Integer, primary_key=True)
    achievement = db.Column(db.String(255), nullable=False, unique=True)

    def to_dict(self):
        return {"id": self.id, "achievement": self.achievement}


class AccountStatus(db.Model):
    __tablename__ = "account_statuses"

    id = db.Column(db.Integer, primary_key=True)
    status = db.Column(db.String(50), nullable=False, unique=True)


class EntityType(db.Model):
    """Order visibility: Public (open to bids) or Private (direct to a writer)."""
    __tablename__ = "entity_types"

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(50), nullable=False, unique=True)


class OrderStatus(db.Model):
    __tablename__ = "order_statuses"

    id = db.Column(db.Integer, primary_key=True)
    status = db.Column(db.String(100), nullable=False, unique=True)

    def to_dict(self):
        return {"id": self.id, "status": self.status}


class OrderFileType(db.Model):
    __tablename__ = "order_file_types"

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(100), nullable=False, unique=True)


class PaymentStatus(db.Model):
    __tablename__ = "payment_statuses"

    id = db.Column(db.Integer, primary_key=True)
    status = db.Column(db.String(50), nullable=False, unique=True)


class PaperDiscount(db.Model):
    __tablename__ = "paper_discounts"

    id = db.Column(db.Integer, primary_key=True)
    lower_limit = db.Column(db.Integer, nullable=False, unique=True)
    discount = db.Column(db.Float, nullable=False)


class SubmissionChecklist(db.Model):
    __tablename__ = "submission_checklist"

    id = db.Column(db.Integer, primary_key=True)
    aspect = db.Column(db.String(100), nullable=False, unique=True)
    aspect_description = db.Column(db.Text)

    def to_dict(self):
        return {"aspect": self.aspect, "aspect_description": self.aspect_description}
