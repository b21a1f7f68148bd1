import logging

from fastapi import FastAPI, File, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse, Response

from frontend import UI_HTML
from prediction_client import PREDICT_URL, PredictionClient
from results import download_filename
from session import SelectedImage, SessionController

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="COVID-19 X-Ray Analysis")


@app.on_event("startup")
def startup_create_session():
    app.state.client = PredictionClient(PREDICT_URL)
    app.state.session = SessionController(app.state.client)


@app.on_event("shutdown")
async def shutdown_close_client():
    await app.state.client.aclose()


@app.get("/health")
def health():
    return {"status": "ok", "predict_url": app.state.client.url}


@app.get("/", response_class=HTMLResponse)
def interface():
    return HTMLResponse(content=UI_HTML)


@app.get("/state")
def state():
    return app.state.session.snapshot(drain=False)


@app.post("/select")
async def select(file: UploadFile = File(...)):
    data = await file.read()
    candidate = SelectedImage(
        filename=file.filename or "upload",
        content_type=file.content_type or "",
        content=data,
    )
    app.state.session.select_file(candidate)
    return app.state.session.snapshot()


@app.post("/clear")
def clear():
    app.state.session.clear()
    return app.state.session.snapshot()


@app.post("/submit")
async def submit():
    await app.state.session.submit()
    return app.state.session.snapshot()


@app.get("/download")
def download():
    image = app.state.session.image
    if image is None:
        return JSONResponse(status_code=404, content={"error": "No image selected."})

    return Response(
        content=image.content,
        media_type=image.content_type,
        headers={"Content-Disposition": f'attachment; filename="{download_filename()}"'},
    )
