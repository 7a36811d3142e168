"""front: Flask 执行服务（脚本目录 / 执行 API）。"""
