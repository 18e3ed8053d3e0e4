from viewstack.assets.asset_manager import AssetManager

__all__ = ['AssetManager']
