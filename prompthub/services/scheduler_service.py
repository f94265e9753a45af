from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from prompthub.utils.logger import logger
from prompthub.services.auth_service import auth_service

class SchedulerService:
    def __init__(self):
        self.scheduler = AsyncIOScheduler()
        logger.info(" SchedulerService initialized")

    def start(self):
        try:
            self.scheduler.add_job(
                func=self.purge_sessions_job,
                trigger=CronTrigger(hour=4, minute=0),
                id='purge_expired_sessions',
                replace_existing=True
            )
            self.scheduler.start()
            logger.info(" Scheduler started - expired session purge registered")
        except Exception as e:
            logger.error(f" Scheduler start failed: {e}")

    def stop(self):
        try:
            if self.scheduler.running:
                self.scheduler.shutdown()
            logger.info(" Scheduler stopped")
        except Exception as e:
            logger.error(f" Scheduler shutdown failed: {e}")

    async def purge_sessions_job(self):
        try:
            removed = await auth_service.purge_expired_sessions()
            logger.info(f" Expired sessions purged: {removed}")
        except Exception as e:
            logger.error(f" Session purge failed: {e}")

scheduler_service = SchedulerService()
