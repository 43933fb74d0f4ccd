#!/usr/bin/env python3
"""
Quadrant Seam Blur API Server
Accepts an image upload, splits it into quadrants, blurs the seams and
writes the recombined result to the image directory.
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from flask import Flask, request, jsonify
from flask_cors import CORS

# --- Centralized Logging Configuration ---
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
    datefmt='%H:%M:%S'
)

from quadrant_blur.config import TilingConfig
from quadrant_blur.exceptions import DecodeError, TooSmallError
from quadrant_blur.pipeline.seam_blender import process_image

app = Flask(__name__)
CORS(app)  # Enable CORS for frontend communication

# Configuration
MAX_CONTENT_LENGTH = int(os.getenv("MAX_UPLOAD_SIZE_MB", "100")) * 1024 * 1024
app.config['MAX_CONTENT_LENGTH'] = MAX_CONTENT_LENGTH

tiling_config = TilingConfig.from_env()

logger = logging.getLogger(__name__)


@app.route('/image/process', methods=['POST'])
def process_image_upload():
    """Split, blur and recombine the uploaded image."""
    logger.info('Image upload started')

    if 'image' not in request.files:
        return jsonify({'success': False, 'message': 'No image provided'}), 400

    file = request.files['image']
    image_buffer = file.read()
    if not image_buffer:
        return jsonify({'success': False, 'message': 'Uploaded file is empty'}), 400

    try:
        result = process_image(image_buffer, tiling_config)
    except (DecodeError, TooSmallError) as e:
        return jsonify({'success': False, 'message': str(e)}), 400
    except Exception as e:
        # already logged by the pipeline
        return jsonify({'success': False, 'message': f'Error processing image: {str(e)}'}), 500

    return jsonify(result.to_dict())


@app.route('/api/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'message': 'Quadrant Seam Blur API is running',
        'output_dir': str(tiling_config.output_dir)
    })


@app.errorhandler(413)
def too_large(e):
    """Handle file too large error."""
    return jsonify({
        'success': False,
        'message': f'File too large. Maximum size is {MAX_CONTENT_LENGTH // (1024*1024)}MB.'
    }), 413


@app.errorhandler(500)
def internal_error(e):
    """Handle internal server error."""
    logger.error(f"Internal server error: {e}")
    return jsonify({'success': False, 'message': 'Internal server error'}), 500


if __name__ == '__main__':
    print("🚀 Starting Quadrant Seam Blur API Server...")
    print(f"📁 Image directory: {tiling_config.output_dir}")
    print(f"🔧 Max upload size: {MAX_CONTENT_LENGTH // (1024*1024)}MB")
    print(f"🔧 Min image size: {tiling_config.min_image_size}px, "
          f"blur offset: {tiling_config.blur_offset}px, blur radius: {tiling_config.blur_radius}")
    print("="*60)

    app.run(
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", "5000")),
        debug=os.getenv("FLASK_DEBUG", "false").lower() == "true"
    )
