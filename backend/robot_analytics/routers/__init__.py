from robot_analytics.routers.real_time import router as real_time_router
from robot_analytics.routers.cumulative import router as cumulative_router
from robot_analytics.routers.performance import router as performance_router
from robot_analytics.routers.environmental import router as environmental_router

__all__ = ["real_time_router", "cumulative_router", "performance_router", "environmental_router"]
