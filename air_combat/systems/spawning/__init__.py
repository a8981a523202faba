from air_combat.systems.spawning.enemy_spawner import EnemyPlacement, EnemySpawner, spawn_wave

__all__ = ['EnemyPlacement', 'EnemySpawner', 'spawn_wave']
