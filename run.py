import uvicorn

from carecrew.config import settings

if __name__ == "__main__":
    uvicorn.run("carecrew.main:app", host="0.0.0.0", port=settings.PORT)
