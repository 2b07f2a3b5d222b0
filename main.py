# uvicorn - server to post and run
# uvicorn api.app:app --reload


if __name__ == "__main__":
    import uvicorn

    from common.config import Settings

    settings = Settings.from_env()
    uvicorn.run("api.app:app", host=settings.host, port=settings.port)
