UI_HTML = """
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>COVID-19 X-Ray Analysis</title>
  <style>
    :root {
      --bg: #f4f7f9;
      --card: #ffffff;
      --text: #13222e;
      --muted: #4c6478;
      --line: #d8e1e8;
      --accent: #0b7285;
      --accent-2: #0f9f80;
      --danger: #b42318;
      --warning: #b54708;
    }
    * { box-sizing: border-box; }
    body {
      margin: 0;
      font-family: "Segoe UI", Tahoma, Geneva, Verdana, sans-serif;
      color: var(--text);
      background:
        radial-gradient(circle at 0% 0%, #e6f7ff 0, transparent 36%),
        radial-gradient(circle at 100% 100%, #ddf9ef 0, transparent 30%),
        var(--bg);
      min-height: 100vh;
      padding: 24px;
    }
    .wrap {
      max-width: 896px;
      margin: 0 auto;
      display: grid;
      gap: 16px;
    }
    header { text-align: center; }
    h1 { margin: 0 0 8px; font-size: 1.8rem; }
    p { margin: 0; color: var(--muted); }
    .tabs {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 4px;
      background: #e9eef2;
      border-radius: 10px;
      padding: 4px;
    }
    .tab {
      border: 0;
      border-radius: 8px;
      padding: 8px;
      background: transparent;
      font-weight: 600;
      cursor: pointer;
    }
    .tab.active { background: var(--card); }
    .tab:disabled { color: #9aabb8; cursor: not-allowed; }
    .card {
      background: var(--card);
      border: 1px solid var(--line);
      border-radius: 14px;
      padding: 18px;
      box-shadow: 0 8px 20px rgba(17, 24, 39, 0.05);
    }
    .hidden { display: none !important; }
    .drop {
      border: 2px dashed var(--line);
      border-radius: 10px;
      padding: 48px 12px;
      text-align: center;
      cursor: pointer;
      transition: background 0.15s ease;
    }
    .drop:hover { background: #f8fafc; }
    .preview-box { position: relative; }
    .preview-box img, .result-img {
      width: 100%;
      max-height: 420px;
      object-fit: contain;
      border-radius: 6px;
      background: #f2f7fb;
      display: block;
    }
    .close {
      position: absolute;
      top: 8px;
      right: 8px;
      width: 32px;
      height: 32px;
      border-radius: 999px;
      border: 1px solid var(--line);
      background: white;
      cursor: pointer;
    }
    .info { margin-top: 10px; font-size: 0.9rem; color: var(--muted); }
    .footer {
      display: flex;
      justify-content: space-between;
      margin-top: 16px;
    }
    .btn {
      border: 0;
      border-radius: 10px;
      background: linear-gradient(135deg, var(--accent), var(--accent-2));
      color: white;
      font-weight: 700;
      padding: 11px 14px;
      cursor: pointer;
      text-decoration: none;
      text-align: center;
      display: inline-block;
      transition: transform 0.15s ease;
    }
    .btn:hover { transform: translateY(-1px); }
    .btn:disabled { opacity: 0.5; cursor: not-allowed; transform: none; }
    .btn.outline { background: white; color: var(--text); border: 1px solid var(--line); }
    .alert {
      border: 1px solid var(--line);
      border-radius: 10px;
      padding: 12px;
      margin-top: 12px;
      font-weight: 600;
    }
    .alert.destructive { border-color: var(--danger); color: var(--danger); }
    .alert.warning { border-color: var(--warning); color: var(--warning); }
    .progress {
      height: 8px;
      border-radius: 999px;
      background: linear-gradient(90deg, var(--accent), var(--accent-2));
      animation: pulse 1.2s ease-in-out infinite;
      margin-top: 8px;
    }
    @keyframes pulse { 50% { opacity: 0.4; } }
    .results {
      display: grid;
      grid-template-columns: repeat(auto-fit, minmax(260px, 1fr));
      gap: 20px;
    }
    .result-image .btn { width: 100%; margin-top: 8px; }
    .bar-row { margin-bottom: 12px; }
    .bar-label { display: flex; justify-content: space-between; font-size: 0.92rem; }
    .bar-track { width: 100%; height: 8px; background: #e5e7eb; border-radius: 999px; margin-top: 4px; }
    .bar-fill { height: 8px; border-radius: 999px; }
    .bold { font-weight: 700; }
    .muted { color: var(--muted); }
    .hint { cursor: help; color: #9aabb8; }
    .note {
      margin-top: 16px;
      padding: 12px;
      background: #f8fafc;
      border-radius: 8px;
      font-size: 0.88rem;
      color: var(--muted);
    }
    .toasts {
      position: fixed;
      right: 16px;
      bottom: 16px;
      display: grid;
      gap: 8px;
      width: 320px;
    }
    .toast {
      background: var(--card);
      border: 1px solid var(--line);
      border-radius: 10px;
      padding: 12px;
      box-shadow: 0 8px 20px rgba(17, 24, 39, 0.12);
    }
    .toast.destructive { background: var(--danger); color: white; }
    .toast.destructive p { color: #fde8e6; }
  </style>
</head>
<body>
  <main class="wrap">
    <header>
      <h1>COVID-19 X-Ray Analysis</h1>
      <p>Upload a chest X-ray image to check for COVID-19 indicators</p>
    </header>

    <nav class="tabs">
      <button id="tabUpload" class="tab active" type="button">Upload X-Ray</button>
      <button id="tabResults" class="tab" type="button" disabled>Results</button>
    </nav>

    <section id="uploadPanel" class="card">
      <h2>Upload X-Ray Image</h2>
      <p>Drag and drop your chest X-ray image or click to browse</p>

      <div id="drop" class="drop" style="margin-top: 14px;">
        <p>Drag and drop your X-ray image here, or click to select</p>
        <p style="font-size: 0.8rem;">Supports: JPEG, PNG, WEBP</p>
        <input id="file" type="file" accept="image/*" class="hidden" />
      </div>

      <div id="selected" class="hidden" style="margin-top: 14px;">
        <div class="preview-box">
          <button id="closeBtn" class="close" type="button">&times;</button>
          <img id="preview" alt="X-ray preview" />
        </div>
        <div id="info" class="info"></div>
      </div>

      <div id="error" class="alert destructive hidden"></div>

      <div class="footer">
        <button id="clearBtn" class="btn outline" type="button" disabled>Clear</button>
        <button id="runBtn" class="btn" type="button" disabled>Analyze X-Ray</button>
      </div>
    </section>

    <section id="resultsPanel" class="card hidden">
      <h2>Analysis Results</h2>
      <p style="margin-bottom: 14px;">AI-based analysis of your chest X-ray image</p>
      <div id="results"></div>
    </section>

    <div id="loading" class="hidden">
      <p>Analyzing your X-ray...</p>
      <div class="progress"></div>
    </div>
  </main>

  <div id="toasts" class="toasts"></div>

  <script>
    const fileInput = document.getElementById("file");
    const drop = document.getElementById("drop");
    const selected = document.getElementById("selected");
    const preview = document.getElementById("preview");
    const info = document.getElementById("info");
    const errorEl = document.getElementById("error");
    const clearBtn = document.getElementById("clearBtn");
    const closeBtn = document.getElementById("closeBtn");
    const runBtn = document.getElementById("runBtn");
    const loadingEl = document.getElementById("loading");
    const tabUpload = document.getElementById("tabUpload");
    const tabResults = document.getElementById("tabResults");
    const uploadPanel = document.getElementById("uploadPanel");
    const resultsPanel = document.getElementById("resultsPanel");
    const resultsEl = document.getElementById("results");
    const toasts = document.getElementById("toasts");

    function showTab(name) {
      const onResults = name === "results";
      tabUpload.classList.toggle("active", !onResults);
      tabResults.classList.toggle("active", onResults);
      uploadPanel.classList.toggle("hidden", onResults);
      resultsPanel.classList.toggle("hidden", !onResults);
    }

    function toast(n) {
      const el = document.createElement("div");
      el.className = `toast ${n.variant}`;
      const title = document.createElement("strong");
      title.textContent = n.title;
      const body = document.createElement("p");
      body.textContent = n.description;
      el.appendChild(title);
      el.appendChild(body);
      toasts.appendChild(el);
      setTimeout(() => el.remove(), 4000);
    }

    function render(state) {
      const hasFile = state.file != null;
      drop.classList.toggle("hidden", hasFile);
      selected.classList.toggle("hidden", !hasFile);
      if (hasFile) {
        preview.src = state.preview || "";
        const dims = state.file.width ? `<p>Dimensions: ${state.file.width} x ${state.file.height}</p>` : "";
        info.innerHTML = "";
        const name = document.createElement("p");
        name.textContent = `File: ${state.file.name}`;
        info.appendChild(name);
        info.insertAdjacentHTML("beforeend", `<p>Size: ${state.file.size_kb} KB</p>${dims}`);
      }

      errorEl.textContent = state.error ? `Error: ${state.error}` : "";
      errorEl.classList.toggle("hidden", !state.error);

      clearBtn.disabled = !hasFile || state.loading;
      runBtn.disabled = !hasFile || state.loading;
      runBtn.textContent = state.loading ? "Analyzing..." : "Analyze X-Ray";
      loadingEl.classList.toggle("hidden", !state.loading);

      tabResults.disabled = !state.results_html;
      resultsEl.innerHTML = state.results_html || "";
      if (!state.results_html) showTab("upload");

      (state.notifications || []).forEach(toast);
    }

    async function call(path, options) {
      try {
        const res = await fetch(path, options);
        const data = await res.json();
        if (!res.ok) {
          throw new Error(data.error || `Request failed (${res.status})`);
        }
        render(data);
        return true;
      } catch (err) {
        toast({ title: "Error", description: err.message || "Unexpected error", variant: "destructive" });
        return false;
      }
    }

    function setBusy(busy) {
      const hasFile = !selected.classList.contains("hidden");
      clearBtn.disabled = busy || !hasFile;
      runBtn.disabled = busy || !hasFile;
      runBtn.textContent = busy ? "Analyzing..." : "Analyze X-Ray";
      loadingEl.classList.toggle("hidden", !busy);
    }

    function selectFile(file) {
      if (!file) return;
      const formData = new FormData();
      formData.append("file", file);
      call("/select", { method: "POST", body: formData });
    }

    fileInput.addEventListener("change", () => {
      selectFile(fileInput.files && fileInput.files[0]);
      fileInput.value = "";
    });
    drop.addEventListener("click", () => fileInput.click());
    drop.addEventListener("dragover", (e) => e.preventDefault());
    drop.addEventListener("drop", (e) => {
      e.preventDefault();
      selectFile(e.dataTransfer.files && e.dataTransfer.files[0]);
    });

    clearBtn.addEventListener("click", () => call("/clear", { method: "POST" }));
    closeBtn.addEventListener("click", () => call("/clear", { method: "POST" }));

    runBtn.addEventListener("click", async () => {
      setBusy(true);
      errorEl.classList.add("hidden");
      const ok = await call("/submit", { method: "POST" });
      // resync after a failed request so the page never stays busy
      if (!ok && !(await call("/state"))) setBusy(false);
    });

    tabUpload.addEventListener("click", () => showTab("upload"));
    tabResults.addEventListener("click", () => showTab("results"));

    call("/state");
  </script>
</body>
</html>
"""
