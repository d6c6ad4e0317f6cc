from loguru import logger
import os

from banquet_booking.core.config import Settings


def setup_logging(settings: Settings):
    log_dir = settings.log_dir

    # Create folder if missing
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # Remove default handler
    logger.remove()

    # General application log
    logger.add(
        f"{log_dir}/app.log",
        rotation="1 week",
        retention="4 weeks",
        level="INFO",
        enqueue=True,
        format="{time} | {level} | {message}"
    )

    # Booking logs
    logger.add(
        f"{log_dir}/bookings.log",
        rotation="1 week",
        retention="4 weeks",
        level="INFO",
        enqueue=True,
        filter=lambda record: record["extra"].get("log_type") == "booking",
        format="{time} | {level} | {message}"
    )

    # Payment logs
    logger.add(
        f"{log_dir}/payments.log",
        rotation="1 week",
        retention="4 weeks",
        level="INFO",
        enqueue=True,
        filter=lambda record: record["extra"].get("log_type") == "payment",
        format="{time} | {level} | {message}"
    )

    # Error logs
    logger.add(
        f"{log_dir}/errors.log",
        rotation="1 week",
        retention="8 weeks",
        level="ERROR",
        enqueue=True,
    )

    return logger


def get_logger():
    return logger
