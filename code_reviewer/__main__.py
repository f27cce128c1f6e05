import uvicorn

from code_reviewer.dependencies import get_settings


def main():
    settings = get_settings()
    uvicorn.run("code_reviewer.api:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
