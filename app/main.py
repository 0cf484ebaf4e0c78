from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import sys
import traceback

from app.api.v1.api import api_router
from app.core.config import settings
from app.db.base import init_db
from app.infrastructure.response import register_exception_handlers, success_response

# 配置日志
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="商品、分类、用户管理API"
)

# 配置CORS - 重要: 必须在其他中间件之前添加
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 统一响应格式：校验失败、业务失败、未知异常都转换为 {"code", "message", "data"}
register_exception_handlers(app)

# 包含API路由
app.include_router(api_router, prefix=settings.API_V1_STR)

@app.on_event("startup")
def startup_db_client():
    """
    应用启动时初始化数据库
    """
    logger.info("正在初始化数据库...")
    try:
        init_db()
        logger.info("数据库初始化成功")
    except Exception as e:
        logger.error(f"数据库初始化失败: {str(e)}")
        # 打印详细的堆栈跟踪信息，便于调试
        logger.error(traceback.format_exc())
        logger.warning("应用将继续启动，但数据库功能可能不可用")

@app.get("/")
def root():
    """健康检查接口"""
    return success_response(
        data={
            "status": "online",
            "version": settings.VERSION
        },
        message=f"{settings.PROJECT_NAME} API服务正在运行"
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
