import logging
import re

from flask import Blueprint, request, jsonify

from app.extensions import db
import app.databases as databases
from app.databases import CandidateNotFoundError

logger = logging.getLogger(__name__)

candidate_process_bp = Blueprint("candidate_process_api", __name__, url_prefix="/api/candidate_process")

INTEGER_RE = re.compile(r"-?[0-9]+")


def parse_id(value):
    """Return ``value`` as an int, or None when it is not a plain integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and INTEGER_RE.fullmatch(value):
        return int(value)
    return None


def parse_candidate_ids(value):
    """
    Validate the ``candidate_ids`` body field.

    Returns a list of ints (empty when the field is absent or null), or
    None when the value is not a list of integer ids.
    """
    if value is None:
        return []
    if not isinstance(value, list):
        return None

    ids = [parse_id(candidate_id) for candidate_id in value]
    if any(candidate_id is None for candidate_id in ids):
        return None
    return ids


def error_message(prefix, error):
    message = str(error)
    if not message:
        return "Unknown error occurred"
    return f"{prefix}{message}"


# list associations for a process -> ?process_id=<n>
@candidate_process_bp.route("", methods=["GET"])
def list_candidate_processes():
    raw_id = request.args.get("process_id")
    if not raw_id:
        return jsonify({"error": "Missing process_id parameter"}), 400

    process_id = parse_id(raw_id)
    if process_id is None:
        return jsonify({"error": "Invalid process_id parameter"}), 400

    try:
        associations = databases.get_candidate_processes_for_process(process_id)
    except Exception as e:
        db.session.rollback()
        logger.error(f"❌ Error listing candidate_process for process {process_id}: {e}")
        return jsonify({"error": error_message("Server Error - ", e)}), 500

    if not associations:
        return jsonify({"error": "No candidate processes found for this process."}), 404

    return jsonify(associations), 200


@candidate_process_bp.route("/<process_id>", methods=["GET"])
def get_process_candidates(process_id):
    parsed_id = parse_id(process_id)
    if parsed_id is None:
        return jsonify({"error": "Invalid process_id parameter"}), 400

    try:
        process = databases.get_process_with_candidates(parsed_id)
        if not process:
            return jsonify({"error": "Process not found."}), 404

        response = databases.process_to_response(process)
    except Exception as e:
        db.session.rollback()
        logger.error(f"❌ Error fetching process {parsed_id}: {e}")
        return jsonify({"error": error_message("Server Error - ", e)}), 500

    return jsonify(response), 200


@candidate_process_bp.route("/<association_id>", methods=["PUT"])
def update_candidate_process(association_id):
    parsed_id = parse_id(association_id)
    if parsed_id is None:
        return jsonify({"error": "Invalid id parameter"}), 400

    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    candidate_ids = parse_candidate_ids(data.get("candidate_ids"))
    if candidate_ids is None:
        return jsonify({"error": "Invalid candidate_ids parameter"}), 400
    fields = {key: data[key] for key in databases.EDITABLE_FIELDS if key in data}

    try:
        result = databases.update_candidate_process(parsed_id, fields, candidate_ids)
    except CandidateNotFoundError as e:
        logger.warning(f"⚠️ {e} (candidate_process {parsed_id})")
        return jsonify({"error": f"Error updating candidate_process: {e}"}), 500
    except Exception as e:
        db.session.rollback()
        logger.error(f"❌ Error updating candidate_process {parsed_id}: {e}")
        return jsonify({"error": error_message("Error updating candidate_process: ", e)}), 500

    if result is None:
        return jsonify({"error": "Candidate-Process association not found"}), 404

    updated, added = result
    if added:
        return jsonify({
            "message": "Candidate-Process updated and candidates added successfully",
            "updatedCandidateProcess": databases.candidate_process_to_dict(updated),
            "addedCandidates": [databases.candidate_process_to_dict(cp) for cp in added],
        }), 200

    return jsonify({
        "message": "Candidate-Process updated successfully",
        "updatedCandidateProcess": databases.candidate_process_to_dict(updated),
    }), 200


@candidate_process_bp.route("/<process_id>", methods=["DELETE"])
def delete_candidate_processes(process_id):
    parsed_id = parse_id(process_id)
    if parsed_id is None:
        return jsonify({"error": "Invalid process_id parameter"}), 400

    try:
        deleted = databases.delete_candidate_processes(parsed_id)
    except Exception as e:
        logger.error(f"❌ Error deleting candidate_process for process {parsed_id}: {e}")
        return jsonify({"error": error_message("Error - ", e)}), 500

    return jsonify({
        "message": "Candidate-Process associations deleted successfully",
        "deleted": deleted,
    }), 200
