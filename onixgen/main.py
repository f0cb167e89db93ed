"""Main application module"""
import os
import logging
import traceback
from datetime import datetime
from logging.handlers import RotatingFileHandler

from flask import Flask, Response, jsonify, request
from pydantic import ValidationError

from .config import config
from .models import Product
from .utils.codelists import find_list, lookup
from .utils.exceptions import ConfigurationError
from .utils.memory_utils import log_memory_usage
from .utils.onix_constants import ONIX_RELEASE, SUPPORTED_DIALECTS
from .utils.onix_processor import generate_onix
from .utils.render_options import RenderOptions, XmlVariant
from .utils.validators import validate_export_request


def build_render_options(app_config, requested=None):
    """Merge request options over the configured ONIX defaults"""
    values = {
        'dialect': app_config['ONIX_DIALECT'],
        'sender_name': app_config['ONIX_SENDER_NAME'],
        'contact_name': app_config['ONIX_CONTACT_NAME'],
        'email_address': app_config['ONIX_EMAIL'],
        'language_code': app_config['ONIX_LANGUAGE_CODE'],
        'asset_host': app_config['ONIX_ASSET_HOST'],
    }
    values.update(requested or {})

    variant = values.get('variant')
    if isinstance(variant, str):
        values['variant'] = getattr(XmlVariant, variant)()

    return RenderOptions.model_validate(values)


def create_app(config_name='default'):
    """Create Flask application"""
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    # Configure logging
    if not app.debug and not app.testing:
        file_handler = RotatingFileHandler(app.config['LOG_FILE'],
                                           maxBytes=app.config['LOG_MAX_BYTES'],
                                           backupCount=app.config['LOG_BACKUP_COUNT'])
        file_handler.setFormatter(logging.Formatter(app.config['LOG_FORMAT']))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        app.logger.info('ONIXGen startup')

    @app.route('/')
    def index():
        """Describe the service"""
        return jsonify({
            'name': app.config['APP_NAME'],
            'onix_release': ONIX_RELEASE,
            'dialects': list(SUPPORTED_DIALECTS),
            'default_dialect': app.config['ONIX_DIALECT'],
        })

    @app.route('/codelists/<name>')
    def codelist(name):
        """Return a code list as JSON"""
        list_id = find_list(name)
        if list_id is None:
            return jsonify({'error': f'Unknown code list: {name}'}), 404
        return jsonify({
            'list': list_id.name.lower(),
            'number': list_id.value,
            'entries': [{'code': entry.onix_code, 'name': entry.display_name} for entry in lookup(list_id)],
        })

    @app.route('/export', methods=['POST'])
    def export():
        """Generate an ONIX document for the posted products"""
        payload = request.get_json(silent=True)
        errors = validate_export_request(payload, app.config['MAX_PRODUCTS_PER_REQUEST'])
        if errors:
            return jsonify({'errors': errors}), 400

        try:
            initial_memory = log_memory_usage('export start')

            options = build_render_options(app.config, payload.get('options'))
            products = [Product.model_validate(item) for item in payload['products']]
            app.logger.info(f"Exporting {len(products)} products as ONIX {options.dialect}")

            document = generate_onix(products, options)

            final_memory = log_memory_usage('export end')
            app.logger.info(f"Memory delta during export: {final_memory - initial_memory:.2f} MB")

        except ValidationError as e:
            messages = [f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()]
            return jsonify({'errors': messages}), 400
        except ConfigurationError as e:
            return jsonify({'errors': [e.message], 'option': e.option}), 400
        except Exception as e:
            app.logger.error(f"Error during export: {str(e)}")
            app.logger.error(traceback.format_exc())
            raise

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return Response(
            document,
            mimetype='application/xml',
            headers={'Content-Disposition': f'attachment; filename=onix_{timestamp}.xml'},
        )

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors"""
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors"""
        return jsonify({'error': 'Internal server error'}), 500

    @app.errorhandler(413)
    def request_entity_too_large(error):
        """Handle request size exceeded errors"""
        limit_mb = app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
        return jsonify({'error': f'Request size exceeded the maximum limit ({limit_mb}MB)'}), 413

    return app


# Create the application instance
app = create_app(os.getenv('FLASK_CONFIG') or 'default')

if __name__ == '__main__':
    app.run()
