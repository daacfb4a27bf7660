#!/usr/bin/env python3
"""
Pool Passport GUI - A desktop window for the harbour pools treasure hunt.

This GUI allows you to:
- Step through the pools one at a time and see each on an OpenStreetMap
- Claim treasure at the selected pool
- Page through your claimed stamps, oldest first
- See every pool at once on the overview map
- Reset all progress on this device

All state lives in PassportSession; this window only draws it.
"""

import sys
import webbrowser
from pathlib import Path
from typing import Dict, Optional

import tkinter as tk
from tkinter import messagebox
from PIL import Image, ImageDraw, ImageTk
from tkintermapview import TkinterMapView

from . import config
from .errors import StorageWriteError
from .maps import native_maps_url
from .projection import LocationDisplay
from .session import PassportSession

# Centre of Sydney Harbour
OVERVIEW_POSITION = (-33.8688, 151.2093)
OVERVIEW_ZOOM = 11
DETAIL_ZOOM = 15
STAMP_CARD_SIZE = 140


class PassportGUI:
    """Window with a list view (one pool + map) and a stamps view."""

    def __init__(self, session: PassportSession, asset_root: Optional[Path] = None):
        self.session = session
        self.asset_root = asset_root or Path(config.catalog_source).parent
        self.on_stamps_view = False
        self.overview_mode = False
        self.markers = []
        # Tk drops images that are not referenced from Python
        self._images: Dict[str, ImageTk.PhotoImage] = {}

        self.root = tk.Tk()
        self.root.title("Harbour Pools Passport")
        self.root.geometry("1100x750")

        self.colors = {
            'bg_dark': '#0f2a3f',
            'bg_medium': '#163b57',
            'bg_light': '#1f4d70',
            'accent': '#f2c14e',  # treasure gold
            'text_primary': '#ffffff',
            'text_secondary': '#b8cfe0',
            'success': '#3ecf8e',
            'border': '#2b5d82'
        }
        self.root.configure(bg=self.colors['bg_dark'])

        self.setup_ui()
        self.session.subscribe(lambda _session: self.render())
        self.render()

    def _button(self, parent, text, command, accent=False):
        return tk.Button(parent, text=text, command=command,
                         bg=self.colors['accent'] if accent else self.colors['bg_light'],
                         fg='#000000' if accent else self.colors['text_primary'],
                         font=('SF Pro Display', 10, 'bold'), relief=tk.FLAT,
                         activebackground=self.colors['accent'], activeforeground='#000000',
                         cursor='hand2', padx=16, pady=8, bd=0)

    def setup_ui(self):
        """Setup the GUI components."""
        header = tk.Frame(self.root, bg=self.colors['bg_medium'])
        header.pack(fill=tk.X)

        tk.Label(header, text="🏴‍☠️ Harbour Pools", font=('SF Pro Display', 16, 'bold'),
                 bg=self.colors['bg_medium'], fg=self.colors['accent']).pack(side=tk.LEFT, padx=15, pady=10)

        self.count_badge = tk.Label(header, text="0 / 0", font=('SF Pro Display', 14, 'bold'),
                                    bg=self.colors['bg_medium'], fg=self.colors['success'])
        self.count_badge.pack(side=tk.LEFT, padx=10)

        self.toggle_button = self._button(header, "My Treasure", self.toggle_view, accent=True)
        self.toggle_button.pack(side=tk.RIGHT, padx=10, pady=8)

        # Reset only shows on the stamps view
        self.reset_button = self._button(header, "Reset", self.reset_progress)

        self.body = tk.Frame(self.root, bg=self.colors['bg_dark'])
        self.body.pack(fill=tk.BOTH, expand=True)

        self._setup_list_view()
        self._setup_stamps_view()
        self.list_view.pack(fill=tk.BOTH, expand=True)

    def _setup_list_view(self):
        self.list_view = tk.Frame(self.body, bg=self.colors['bg_dark'])

        card = tk.Frame(self.list_view, bg=self.colors['bg_medium'])
        card.pack(fill=tk.X, padx=15, pady=15)

        self.pool_name = tk.Label(card, text="No pools loaded.", font=('SF Pro Display', 15, 'bold'),
                                  bg=self.colors['bg_medium'], fg=self.colors['text_primary'], anchor='w')
        self.pool_name.pack(side=tk.LEFT, padx=15, pady=12, fill=tk.X, expand=True)

        self.stamp_chip = self._button(card, "", self.claim_selected, accent=True)
        self.stamp_chip.pack(side=tk.RIGHT, padx=15)

        nav = tk.Frame(self.list_view, bg=self.colors['bg_dark'])
        nav.pack(fill=tk.X, padx=15)
        self._button(nav, "▲ Up", self.select_next).pack(side=tk.LEFT, padx=5)
        self._button(nav, "▼ Down", self.select_previous).pack(side=tk.LEFT, padx=5)
        self.position_label = tk.Label(nav, text="0/0", font=('SF Pro Display', 12, 'bold'),
                                       bg=self.colors['bg_dark'], fg=self.colors['accent'])
        self.position_label.pack(side=tk.LEFT, padx=15)
        self._button(nav, "🗺 Open in Maps", self.open_in_maps).pack(side=tk.RIGHT, padx=5)
        self.overview_button = self._button(nav, "Show all pools", self.toggle_overview)
        self.overview_button.pack(side=tk.RIGHT, padx=5)

        self.overview_label = tk.Label(self.list_view, text="", font=('SF Pro Display', 10),
                                       bg=self.colors['bg_dark'], fg=self.colors['text_secondary'], anchor='w')
        self.overview_label.pack(fill=tk.X, padx=20, pady=(8, 0))

        self.map_widget = TkinterMapView(self.list_view, corner_radius=0)
        self.map_widget.pack(fill=tk.BOTH, expand=True, padx=15, pady=15)
        self.map_widget.set_tile_server("https://a.tile.openstreetmap.org/{z}/{x}/{y}.png")
        self.map_widget.set_position(*OVERVIEW_POSITION)
        self.map_widget.set_zoom(OVERVIEW_ZOOM)

    def _setup_stamps_view(self):
        self.stamps_view = tk.Frame(self.body, bg=self.colors['bg_dark'])

        self.stamps_grid = tk.Frame(self.stamps_view, bg=self.colors['bg_dark'])
        self.stamps_grid.pack(fill=tk.BOTH, expand=True, padx=15, pady=15)

        pager = tk.Frame(self.stamps_view, bg=self.colors['bg_dark'])
        pager.pack(pady=15)
        self.prev_page_button = self._button(pager, "← Prev", self.previous_page)
        self.prev_page_button.pack(side=tk.LEFT, padx=5)
        self.page_label = tk.Label(pager, text="Page 1 of 1", font=('SF Pro Display', 12, 'bold'),
                                   bg=self.colors['bg_dark'], fg=self.colors['text_primary'])
        self.page_label.pack(side=tk.LEFT, padx=20)
        self.next_page_button = self._button(pager, "Next →", self.next_page)
        self.next_page_button.pack(side=tk.LEFT, padx=5)

    def create_placeholder_image(self, text: str, size: int) -> Image.Image:
        """Create a round placeholder when a stamp image is missing."""
        img = Image.new('RGBA', (size, size), (0, 0, 0, 0))
        draw = ImageDraw.Draw(img)
        draw.ellipse((2, 2, size - 2, size - 2), outline=self.colors['accent'], width=3)
        draw.text((size // 2 - 4, size // 2 - 6), text[:1].upper(), fill=self.colors['accent'])
        return img

    def stamp_photo(self, display: LocationDisplay, size: int) -> ImageTk.PhotoImage:
        """Load a pool's stamp image scaled to ``size``, cached per size."""
        cache_key = f"{display.stamp_src}@{size}"
        if cache_key in self._images:
            return self._images[cache_key]
        path = self.asset_root / display.stamp_src
        try:
            img = Image.open(path).convert('RGBA')
            img.thumbnail((size, size), Image.Resampling.LANCZOS)
        except (OSError, ValueError) as e:
            print(f"Could not load stamp {path}: {e}")
            img = self.create_placeholder_image(display.name, size)
        photo = ImageTk.PhotoImage(img)
        self._images[cache_key] = photo
        return photo

    def render(self):
        """Redraw everything from a fresh projection."""
        view = self.session.project()
        self.count_badge.config(text=view.badge)
        self.overview_label.config(text=view.overview)
        self.render_list(view)
        if self.on_stamps_view:
            self.render_stamps(view)

    def render_list(self, view):
        selected = view.selected
        if selected is None:
            self.pool_name.config(text="No pools loaded.")
            self.stamp_chip.config(text="", state=tk.DISABLED)
            self.position_label.config(text="0/0")
            return
        self.pool_name.config(text=selected.name)
        self.stamp_chip.config(text=selected.caption,
                               state=tk.DISABLED if selected.stamped else tk.NORMAL)
        self.position_label.config(text=f"{view.selected_index + 1}/{view.catalog_length}")
        self.render_markers(selected)

    def _clear_markers(self):
        for marker in self.markers:
            marker.delete()
        self.markers = []

    def _add_marker(self, display: LocationDisplay, size: int):
        if display.stamped:
            marker = self.map_widget.set_marker(display.lat, display.lng, text=display.name,
                                                icon=self.stamp_photo(display, size))
        else:
            marker = self.map_widget.set_marker(display.lat, display.lng, text=display.name,
                                                marker_color_circle="#ffffff",
                                                marker_color_outside="#d62828")
        self.markers.append(marker)

    def render_markers(self, selected: LocationDisplay):
        self._clear_markers()
        if self.overview_mode:
            for location in self.session.catalog:
                record = self.session.ledger.get(location.id)
                self._add_marker(LocationDisplay.build(location, record), 46)
            return
        self._add_marker(selected, 44)
        self.map_widget.set_position(selected.lat, selected.lng)
        self.map_widget.set_zoom(DETAIL_ZOOM)

    def render_stamps(self, view, pop_id: Optional[str] = None):
        for child in self.stamps_grid.winfo_children():
            child.destroy()
        if not view.stamps:
            tk.Label(self.stamps_grid, text="No treasure claimed yet.", font=('SF Pro Display', 12),
                     bg=self.colors['bg_dark'], fg=self.colors['text_secondary']).pack(pady=40)
        for column, stamp in enumerate(view.stamps):
            card = tk.Frame(self.stamps_grid, bg=self.colors['bg_medium'],
                            highlightbackground=self.colors['accent'] if stamp.id == pop_id else self.colors['border'],
                            highlightthickness=2)
            card.grid(row=0, column=column, padx=15, pady=15, sticky='n')
            tk.Label(card, text=stamp.name, font=('SF Pro Display', 13, 'bold'),
                     bg=self.colors['bg_medium'], fg=self.colors['text_primary']).pack(padx=15, pady=(12, 2))
            if stamp.suburb:
                tk.Label(card, text=stamp.suburb, font=('SF Pro Display', 10),
                         bg=self.colors['bg_medium'], fg=self.colors['text_secondary']).pack()
            tk.Label(card, image=self.stamp_photo(stamp, STAMP_CARD_SIZE),
                     bg=self.colors['bg_medium']).pack(padx=15, pady=10)
            tk.Label(card, text=stamp.date, font=('SF Pro Display', 11),
                     bg=self.colors['bg_medium'], fg=self.colors['accent']).pack(pady=(0, 12))

        self.page_label.config(text=view.page_label)
        self.prev_page_button.config(state=tk.NORMAL if view.can_retreat else tk.DISABLED)
        self.next_page_button.config(state=tk.NORMAL if view.can_advance else tk.DISABLED)

    def toggle_view(self):
        """Switch between the list view and the stamps view."""
        self.on_stamps_view = not self.on_stamps_view
        if self.on_stamps_view:
            self.list_view.pack_forget()
            self.stamps_view.pack(fill=tk.BOTH, expand=True)
            self.reset_button.pack(side=tk.RIGHT, padx=5, pady=8)
            self.toggle_button.config(text="Back to List")
        else:
            self.stamps_view.pack_forget()
            self.list_view.pack(fill=tk.BOTH, expand=True)
            self.reset_button.pack_forget()
            self.toggle_button.config(text="My Treasure")
        self.render()

    def toggle_overview(self):
        self.overview_mode = not self.overview_mode
        self.overview_button.config(text="Back to pool" if self.overview_mode else "Show all pools")
        if self.overview_mode:
            self.map_widget.set_position(*OVERVIEW_POSITION)
            self.map_widget.set_zoom(OVERVIEW_ZOOM)
        self.render()

    def _guarded(self, action):
        """Run a session operation, warning if progress could not be saved."""
        try:
            return action()
        except StorageWriteError as e:
            print(f"Error saving progress: {e}")
            messagebox.showwarning("Not Saved", "Your progress may not be saved this time.")
            return None

    def claim_selected(self):
        result = self._guarded(self.session.claim)
        if result is None or not result.newly_claimed:
            return
        if self.on_stamps_view:
            self.render_stamps(self.session.project(), pop_id=result.location.id)
        messagebox.showinfo("Treasure Found!", f"✨ {result.location.name}")
        if result.completed:
            self.root.after(900, lambda: messagebox.showinfo(
                "ALL TREASURE FOUND!", "🎉🏴‍☠️✨\n\nCaptain Raymond is proud of you!"))

    def select_next(self):
        self._guarded(self.session.next)

    def select_previous(self):
        self._guarded(self.session.previous)

    def next_page(self):
        self._guarded(self.session.next_page)

    def previous_page(self):
        self._guarded(self.session.previous_page)

    def reset_progress(self):
        if not messagebox.askyesno("Reset", "Reset all treasure on this device, First Mate?"):
            return
        self._guarded(self.session.reset)

    def open_in_maps(self):
        location = self.session.selected_location()
        if location is None:
            return
        webbrowser.open(native_maps_url(location, "ios" if sys.platform == "ios" else ""))

    def run(self):
        """Start the GUI main loop."""
        self.root.protocol("WM_DELETE_WINDOW", self.on_closing)
        self.root.mainloop()

    def on_closing(self):
        """Handle window closing."""
        self._guarded(self.session.flush)
        self.root.destroy()


def main(argv=None):
    """Main entry point for the passport GUI."""
    from .args import setup_config
    from .main import build_session

    setup_config(argv)
    app = PassportGUI(build_session())
    app.run()


if __name__ == "__main__":
    main()
