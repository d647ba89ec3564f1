import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from raster import PATH_COLOR, WALL_COLOR


class Visualizer:
    def __init__(self, maze):
        self.maze = maze
        self.fig, self.ax = plt.subplots(figsize=(8, 8))
        self.frame = maze.surface.pixels.copy()
        self.setup_plot()

    def _fill(self, c, color):
        s = self.maze.cell_size
        self.frame[c.y * s:(c.y + 1) * s, c.x * s:(c.x + 1) * s] = color

    def setup_plot(self):
        """Start from the finished maze with every grown cell shown as wall."""
        self.fig.suptitle("Randomized Prim's Growth")
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        for c in self.maze.history:
            self._fill(c, WALL_COLOR)
        self.maze_im = self.ax.imshow(self.frame, interpolation='nearest')

    def update_frame(self, frame_num):
        if frame_num < len(self.maze.history):
            self._fill(self.maze.history[frame_num], PATH_COLOR)
            self.maze_im.set_data(self.frame)
        return [self.maze_im]

    def animate(self, interval=20):
        """Replay the order in which cells became path."""
        anim = FuncAnimation(self.fig,
                             self.update_frame,
                             frames=len(self.maze.history),
                             interval=interval,
                             blit=True,
                             repeat=False)
        plt.show()
        return anim
