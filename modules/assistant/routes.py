from flask import current_app, jsonify
from flask_login import current_user

from validation import parse_body

from . import bp
from .catalog import COURSE_TOPICS
from .models import create_feedback, create_question, list_questions_for_owner
from .schemas import AskQuestionRequest, FeedbackRequest


@bp.route("/question", methods=["POST"])
def ask_question():
    data = parse_body(AskQuestionRequest)

    generator = current_app.extensions["answer_generator"]
    result = generator.ask(data.question, COURSE_TOPICS)

    payload = {"answer": result.answer, "lesson": result.lesson}
    # anonymous questions are answered but not stored
    if current_user.is_authenticated:
        record = create_question(
            question=data.question,
            answer=result.answer,
            lesson=result.lesson,
            owner_id=current_user.id,
        )
        payload["questionId"] = record.id
    return jsonify(payload)


@bp.route("/questions")
def question_history():
    return jsonify([q.to_dict() for q in list_questions_for_owner(current_user.id)])


@bp.route("/feedback", methods=["POST"])
def submit_feedback():
    data = parse_body(FeedbackRequest)
    create_feedback(question_id=data.question_id, is_helpful=data.is_helpful, comment=data.comment)
    return jsonify(success=True)
