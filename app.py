# app.py
# CustomTkinter GUI for the word graph engine (dark theme).
# - Load a book file or a folder of .txt files.
# - Background build thread (keeps UI responsive).
# - Shortest path / words-at-hops / generator queries; results & event log panes.

from __future__ import annotations
import threading
from typing import Callable, List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (pip install -e . or PYTHONPATH=src)
from wordgraph.engine import Engine
from wordgraph.normalize import normalize_word
from wordgraph.report import hop_lines, path_lines, sentence_lines
from wordgraph.search import InvalidHopCount


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


# -------------------- main app --------------------

class WordGraphApp(ctk.CTk):
    """Dark-themed GUI that builds a word graph from a book and queries it."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Word Graph")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._engine = Engine()
        self._loading_thread: Optional[threading.Thread] = None

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # log

        self._build_header()
        self._build_source_bar()
        self._build_query_bar()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Word Graph", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        ctk.CTkButton(bar, text="Choose Book", command=self._choose_file).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        ctk.CTkButton(bar, text="Choose Folder", command=self._choose_folder).grid(
            row=0, column=1, padx=(0, 6), pady=10, sticky="w"
        )

        self.lbl_source = ctk.CTkLabel(bar, text="No source selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: -", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_query_bar(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)

        self.entry_start = ctk.CTkEntry(box, placeholder_text="start word", width=160)
        self.entry_start.grid(row=0, column=0, padx=(12, 6), pady=10)
        self.entry_target = ctk.CTkEntry(box, placeholder_text="target word", width=160)
        self.entry_target.grid(row=0, column=1, padx=6, pady=10)
        self.entry_n = ctk.CTkEntry(box, placeholder_text="hops / length", width=110)
        self.entry_n.grid(row=0, column=2, padx=6, pady=10)

        ctk.CTkButton(box, text="Shortest Path", width=120, command=self._do_path).grid(row=0, column=3, padx=6)
        ctk.CTkButton(box, text="Words at Hops", width=120, command=self._do_hops).grid(row=0, column=4, padx=6)
        ctk.CTkButton(box, text="Generate", width=100, command=self._do_generate).grid(row=0, column=5, padx=(6, 12))

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Results", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )
        self.txt_results = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_results.configure(state="disabled")
        self._set_results("(no results yet - load a book and run a query)")

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )
        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready. Choose a book or folder to begin.")

    # --------- source selection ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose book",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if path:
            self._start_loading(path)

    def _choose_folder(self) -> None:
        path = fd.askdirectory(title="Choose corpus folder")
        if path:
            self._start_loading(path)

    # --------- loading pipeline (threaded) ---------

    def _start_loading(self, source: str) -> None:
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A corpus is already loading. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(source))
        self._set_status("Building graph…")
        self.progress.start()

        self._loading_thread = threading.Thread(target=self._load_worker, args=(source,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, source: str) -> None:
        # build into a fresh engine so queries keep using the old graph until this one is ready
        eng = Engine()
        try:
            eng.build([source])
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(eng))

    def _on_load_ok(self, eng: Engine) -> None:
        self.progress.stop()
        self._engine.shutdown()
        self._engine = eng
        n_nodes, n_edges = len(eng.graph), eng.graph.edge_count
        self._set_status(f"{n_nodes:,} words, {n_edges:,} edges")
        self._log(f"Graph ready ({n_nodes} nodes, {n_edges} edges).")
        self.entry_start.focus_set()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading corpus.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load corpus.\nSee event log for details.")

    # --------- queries ---------

    def _int_field(self, default: int) -> int:
        raw = self.entry_n.get().strip()
        return int(raw) if raw else default

    def _query(self, name: str, fn: Callable[[], List[str]]) -> None:
        if not self._engine.ready:
            self._set_results("error: please load a book before querying.")
            self._log(f"{name} attempted before corpus load.")
            return
        try:
            lines = fn()
        except (InvalidHopCount, ValueError) as exc:
            self._set_results(f"error: {exc}")
            self._log(f"ERROR in {name}: {exc!r}")
            return
        self._set_results("\n".join(lines))

    def _do_path(self) -> None:
        a = normalize_word(self.entry_start.get())
        b = normalize_word(self.entry_target.get())
        self._query("shortest path", lambda: path_lines(a, b, self._engine.shortest_path(a, b)))

    def _do_hops(self) -> None:
        a = normalize_word(self.entry_start.get())

        def run() -> List[str]:
            h = self._int_field(1)
            return hop_lines(a, h, self._engine.nodes_at_hops(a, h))
        self._query("words at hops", run)

    def _do_generate(self) -> None:
        a = normalize_word(self.entry_start.get())
        self._query("generate", lambda: sentence_lines(self._engine.generate(a, self._int_field(6))))

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = WordGraphApp()
    app.mainloop()
