from flask import Flask

from blockserve.common.errors import DataBlockError
from blockserve.common.response import fail
from blockserve.routes.content_routes import content_bp
from blockserve.services.block_cache import BlockCache


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object('blockserve.config.Config')
    if config:
        app.config.update(config)

    if app.config["ENABLE_CACHE"]:
        app.extensions["block_cache"] = BlockCache(
            max_entries=app.config["CACHE_MAX_ENTRIES"],
            compression_speed=app.config["COMPRESSION_SPEED"],
        )

    # 数据块无法解压时终止请求，不发送任何内容
    @app.errorhandler(DataBlockError)
    def handle_data_block_error(e):
        return fail(f"数据块处理失败: {e}", code=500, status=500)

    app.register_blueprint(content_bp)

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(host='0.0.0.0', port=5000, debug=True)
