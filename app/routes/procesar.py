"""
Processing Routes

/api/procesar: GET health probe against the users store, POST upload of a
DOCX plus instruction, answered with the model's compliance table. Every
other method gets a plain-text 405.
"""

from flask import Blueprint, Response, request, current_app, url_for
from werkzeug.exceptions import MethodNotAllowed

from app.services.database import count_users
from app.services.document_processor import convert_docx_to_markdown
from app.services.prompt_builder import build_prompt
from app.services.ai_service import send_prompt_to_completion_api
from app.utils.file_helpers import save_upload, remove_file_quietly
from app.utils.responses import ProcessingSuccess, ProcessingFailure, HealthOk, HealthFailure
from app.utils.logging_utils import get_logger, get_trace_id, RequestTimer, log_request_summary

logger = get_logger(__name__)
procesar_bp = Blueprint('procesar', __name__, url_prefix='/api')

MISSING_FILE_ERROR = "Falta archivo .docx"
MISSING_PATH_ERROR = "No se encontró la ruta del archivo subido"
METHOD_NOT_ALLOWED = "Método no permitido"


@procesar_bp.route('/procesar', methods=['GET', 'POST'], provide_automatic_options=False)
def procesar():
    if request.method == 'GET':
        return health_probe().to_response()

    if request.method == 'POST':
        return process_upload().to_response()

    # HEAD is routed here automatically alongside GET
    return method_not_allowed()


def method_not_allowed():
    response = Response(METHOD_NOT_ALLOWED, status=405, mimetype='text/plain')
    response.headers['Allow'] = 'GET, POST'
    return response


@procesar_bp.app_errorhandler(MethodNotAllowed)
def handle_method_not_allowed(error):
    """Methods rejected by the router, e.g. OPTIONS, PUT or TRACE."""
    if request.path == url_for('procesar.procesar'):
        logger.warning(f"Rejected {request.method} on {request.path}")
        return method_not_allowed()
    return error.get_response()


def health_probe():
    """Counts user records to confirm the store is reachable."""
    try:
        return HealthOk(users=count_users())
    except Exception as e:
        logger.error(f"DB ping error: {e}")
        return HealthFailure(error=str(e))


def process_upload():
    """Runs parse, extraction, prompt assembly and completion for one upload."""
    timer = RequestTimer()
    summary = {"trace_id": get_trace_id(), "status": "error"}
    stored_path = None

    try:
        timer.start_step("parse")
        uploads = request.files.getlist('docx')
        uploaded = uploads[0] if uploads else None
        if uploaded is None or not uploaded.filename:
            logger.warning("No docx file in request")
            return ProcessingFailure(MISSING_FILE_ERROR, status_code=400)

        instruction = request.form.get('prompt', '')
        display_name = uploaded.filename
        summary["filename"] = display_name
        logger.info(f"Processing upload: {display_name} ({uploaded.mimetype})")

        stored_path = save_upload(uploaded, current_app.config['TEMP_UPLOAD_FOLDER'])
        if not stored_path:
            return ProcessingFailure(MISSING_PATH_ERROR)

        timer.start_step("extraction")
        document_text = convert_docx_to_markdown(stored_path)
        summary["extracted_chars"] = len(document_text)

        prompt = build_prompt(instruction, display_name, document_text)
        logger.debug(f"Assembled prompt ({len(prompt)} chars)")

        timer.start_step("completion")
        resultado = send_prompt_to_completion_api(prompt)
        timer.end_step()

        summary["status"] = "success"
        return ProcessingSuccess(resultado=resultado, prompt=prompt)
    except Exception as e:
        # Parse errors and oversized bodies land here too
        logger.exception(f"Error in POST /api/procesar: {e}")
        return ProcessingFailure(str(e))
    finally:
        remove_file_quietly(stored_path)
        timing = timer.get_summary()
        summary["total_time"] = timing["total_time_seconds"]
        summary["step_times"] = timing["steps"]
        log_request_summary(logger, summary)
