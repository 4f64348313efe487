"""
Collision detection and handling
"""

from utils.helpers import distance


class CollisionHandler:
    """
    Handles all collision detection and response in the game
    """
    def check_player_position(self, player, entities, grid, exit_pos, now, config):
        """
        Check player's current position for collisions with entities

        Args:
            player: Player object
            entities: Dict with 'enemies', 'traps' and 'powerups' lists
            grid: MazeGrid (traps flip its walls)
            exit_pos: Exit center in pixels
            now: Session time in seconds
            config: GameConfig

        Returns:
            Dictionary with collision results:
            {
                'enemy': Enemy or None,
                'traps': [Trap, ...],
                'powerups': [PowerUp, ...],
                'caught': bool,
                'escaped': bool
            }
        """
        result = {
            'enemy': None,
            'traps': [],
            'powerups': [],
            'caught': False,
            'escaped': False
        }

        px, py = player.x, player.y

        # Enemy contact ends the run, nothing else is checked
        enemy = self.check_enemies(px, py, entities['enemies'], config.enemy_reach)
        if enemy:
            result['enemy'] = enemy
            result['caught'] = True
            return result

        # Trap triggers
        for trap in entities['traps']:
            if trap.active and trap.contains(px, py, config.cell_size):
                trap.trigger(grid)
                result['traps'].append(trap)

        # Power-up pickups
        for powerup in entities['powerups']:
            if not powerup.active:
                continue
            cx = powerup.i * config.cell_size + config.cell_size / 2
            cy = powerup.j * config.cell_size + config.cell_size / 2
            if distance(px, py, cx, cy) < config.pickup_reach:
                powerup.apply(player, now, config)
                result['powerups'].append(powerup)

        # Exit
        ex, ey = exit_pos
        if distance(px, py, ex, ey) < config.exit_reach:
            result['escaped'] = True

        return result

    def check_enemies(self, px, py, enemies, reach):
        """Get the first enemy within reach of a position, or None"""
        for enemy in enemies:
            if enemy.collides_with(px, py, reach):
                return enemy
        return None
